"""Money helpers working in integer minor units (cents).

Amounts never travel as floats. Conversions to and from major units go
through Decimal with ROUND_HALF_UP, and ratios are rounded with exact integer
arithmetic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Literal

from household_spending.config import get_settings

CENTS_PER_UNIT = 100

_NON_NUMERIC = re.compile(r"[^\d.]")

TrendDirection = Literal["up", "down", "neutral"]


@dataclass(frozen=True)
class AmountParts:
    """Integer and fractional parts of an amount, formatted for display."""

    main: str
    decimal: str


@dataclass(frozen=True)
class TrendPercentage:
    """Trend badge value shown next to a total."""

    percentage: int
    direction: TrendDirection


def round_ratio(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer.

    Halves round toward positive infinity, so ``round_ratio(-25, 2) == -12``.
    ``denominator`` must be positive.
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")
    return (2 * numerator + denominator) // (2 * denominator)


def to_cents(amount: Decimal | str | int) -> int:
    """Convert an amount in major units to minor units, rounding half-up."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount: {amount!r}") from exc
    cents = (value * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


def to_major_units(cents: int) -> Decimal:
    """Return ``cents`` as an exact two-decimal Decimal."""
    return (Decimal(cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"))


def parse_amount_input(text: str) -> int | None:
    """Parse free-form amount input (``"12,34"``, ``"123 SEK"``) into cents.

    Anything that is not a digit or separator is dropped and only the first
    decimal point is kept, so ``"1.2.3"`` reads as ``1.23``. Input with no
    digits at all parses to 0; a lone separator is rejected with ``None``.
    """
    cleaned = _NON_NUMERIC.sub("", text.replace(",", ".", 1))
    head, dot, tail = cleaned.partition(".")
    normalized = head + dot + tail.replace(".", "")

    if not normalized:
        return 0
    if normalized == ".":
        return None
    return to_cents(normalized)


def cents_to_input_value(cents: int) -> str:
    """Render cents for an input field, e.g. ``"123.45"``."""
    return f"{to_major_units(cents):.2f}"


def format_money(cents: int, currency: str | None = None) -> str:
    """Render cents with a currency suffix, e.g. ``"123.45 SEK"``."""
    code = currency or get_settings().currency_code
    return f"{cents_to_input_value(cents)} {code}"


def _group_thousands(value: int, separator: str) -> str:
    return f"{value:,}".replace(",", separator)


def split_amount(cents: int) -> AmountParts:
    """Split cents into grouped main units and a two-digit fraction."""
    separator = get_settings().thousands_separator
    sign = "-" if cents < 0 else ""
    main, fraction = divmod(abs(cents), CENTS_PER_UNIT)
    return AmountParts(
        main=sign + _group_thousands(main, separator),
        decimal=f"{fraction:02d}",
    )


def format_amount(cents: int) -> str:
    """Render cents with locale-style grouping, e.g. ``"1 234 567,89"``."""
    parts = split_amount(cents)
    return f"{parts.main}{get_settings().decimal_separator}{parts.decimal}"


def trend_percentage(current: int, previous: int) -> TrendPercentage:
    """Percentage change badge between two totals.

    Unlike the month-over-month change, a zero previous value is shown as
    neutral rather than as a 100% increase.
    """
    if previous == 0:
        return TrendPercentage(percentage=0, direction="neutral")

    change = round_ratio((current - previous) * 100, abs(previous))
    if change == 0:
        return TrendPercentage(percentage=0, direction="neutral")
    return TrendPercentage(
        percentage=abs(change),
        direction="up" if change > 0 else "down",
    )
