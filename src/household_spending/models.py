"""Value types consumed and produced by the analytics engine.

Inputs (Expense, Category, Payer) arrive already fetched and validated by the
storage layer. Everything else is a derived aggregate, rebuilt on every call
and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

# Zero-padded "YYYY-MM"; string ordering matches calendar ordering.
MonthKey = str


@dataclass(frozen=True)
class Expense:
    """A live (non-deleted) expense row."""

    id: str
    amount_cents: int
    paid_by: str
    date: date
    category: str
    note: str | None = None
    deleted: bool = False


@dataclass(frozen=True)
class Category:
    """Household category reference row."""

    id: str
    name: str
    display_order: int = 0
    color: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class Payer:
    """Household member who can pay for expenses."""

    id: str
    display_name: str


@dataclass(frozen=True)
class PersonTotal:
    paid_by: str
    total: int


@dataclass(frozen=True)
class CategoryPersonTotal:
    category: str
    paid_by: str
    total: int


@dataclass(frozen=True)
class MonthSummary:
    """Per-payer and per-(category, payer) totals for one month.

    ``totals_by_person`` lists every household payer; ``totals_by_category``
    only lists pairs that actually have spend.
    """

    totals_by_person: tuple[PersonTotal, ...]
    totals_by_category: tuple[CategoryPersonTotal, ...]
    grand_total: int

    def total_for(self, payer_id: str) -> int:
        """Return the total paid by ``payer_id`` (0 if unknown)."""
        for item in self.totals_by_person:
            if item.paid_by == payer_id:
                return item.total
        return 0


@dataclass(frozen=True)
class CumulativeDataPoint:
    date: date
    cumulative: int


@dataclass(frozen=True)
class CategoryBreakdownItem:
    name: str
    amount: int
    percentage: int
    color: str


class ChangeDirection(str, Enum):
    """Direction of a month-over-month change."""

    UP = "up"
    DOWN = "down"
    FLAT = "flat"


@dataclass(frozen=True)
class MonthChange:
    """Unsigned percentage change; the sign lives in ``direction``."""

    percent_change: int
    direction: ChangeDirection


@dataclass(frozen=True)
class PayerBalance:
    """How much a payer paid versus their fair share.

    Positive ``balance`` means the payer overpaid and is owed money.
    """

    payer_id: str
    payer_name: str
    paid: int
    share: int
    balance: int


@dataclass(frozen=True)
class Settlement:
    """Single transfer that settles a two-payer household."""

    from_payer: str
    to_payer: str
    amount: int
    from_payer_id: str
    to_payer_id: str


@dataclass(frozen=True)
class MonthlyTotal:
    month: MonthKey
    label: str
    total: int


@dataclass(frozen=True)
class CategoryTrendEntry:
    name: str
    total: int
    color: str


@dataclass(frozen=True)
class CategoryTrend:
    """Category totals for one month; lists every household category."""

    month: MonthKey
    label: str
    categories: tuple[CategoryTrendEntry, ...]

    def total_for(self, name: str) -> int:
        for entry in self.categories:
            if entry.name == name:
                return entry.total
        return 0
