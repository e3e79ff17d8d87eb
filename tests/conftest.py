"""Pytest configuration and fixtures."""

import os
from datetime import date
from itertools import count

import pytest

# Pin environment variables before importing settings
os.environ.setdefault("CURRENCY_CODE", "SEK")
os.environ.setdefault("THOUSANDS_SEPARATOR", " ")
os.environ.setdefault("DECIMAL_SEPARATOR", ",")
os.environ.setdefault("SETTLEMENT_TOLERANCE_CENTS", "1")
os.environ.setdefault("SHARE_STRATEGY", "rounded")
os.environ.setdefault("LOG_LEVEL", "INFO")

from household_spending.config import get_settings, load_category_palette  # noqa: E402
from household_spending.models import Category, Expense, Payer  # noqa: E402


@pytest.fixture
def fresh_settings():
    """Drop cached settings and palette around a test that changes the env."""
    get_settings.cache_clear()
    load_category_palette.cache_clear()
    yield
    get_settings.cache_clear()
    load_category_palette.cache_clear()


@pytest.fixture
def make_expense():
    """Factory for expenses with sensible defaults."""
    ids = count(1)

    def _make(
        amount_cents: int = 1000,
        paid_by: str = "alice",
        on: date = date(2025, 1, 15),
        category: str = "Groceries",
        note: str | None = None,
    ) -> Expense:
        return Expense(
            id=f"exp-{next(ids)}",
            amount_cents=amount_cents,
            paid_by=paid_by,
            date=on,
            category=category,
            note=note,
        )

    return _make


@pytest.fixture
def payers():
    return [
        Payer(id="alice", display_name="Alice"),
        Payer(id="bob", display_name="Bob"),
    ]


@pytest.fixture
def categories():
    return [
        Category(id="cat-1", name="Groceries", display_order=0),
        Category(id="cat-2", name="Rent", display_order=1),
    ]


@pytest.fixture
def january_expenses(make_expense):
    """Alice 40.00 Groceries, Bob 20.00 Groceries, Alice 30.00 Rent."""
    return [
        make_expense(4000, "alice", date(2025, 1, 3), "Groceries"),
        make_expense(2000, "bob", date(2025, 1, 10), "Groceries"),
        make_expense(3000, "alice", date(2025, 1, 1), "Rent"),
    ]
