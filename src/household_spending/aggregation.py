"""Single-month aggregation over a snapshot of live expenses."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date

import structlog

from household_spending.config import load_category_palette
from household_spending.dates import month_bounds, month_days
from household_spending.models import (
    Category,
    CategoryBreakdownItem,
    CategoryPersonTotal,
    CumulativeDataPoint,
    Expense,
    MonthKey,
    MonthSummary,
    Payer,
    PersonTotal,
)
from household_spending.money import round_ratio

logger = structlog.get_logger(__name__)


def grand_total(expenses: Iterable[Expense]) -> int:
    """Sum of all expense amounts in minor units."""
    return sum(expense.amount_cents for expense in expenses)


def category_totals(expenses: Iterable[Expense]) -> dict[str, int]:
    """Total per category name, only for categories that appear."""
    totals: dict[str, int] = defaultdict(int)
    for expense in expenses:
        totals[expense.category] += expense.amount_cents
    return dict(totals)


def pick_color(category: Category, index: int, palette: Sequence[str]) -> str:
    """Stored category colour, or the palette entry at ``index`` (wrapping)."""
    if category.color:
        return category.color
    return palette[index % len(palette)]


def summarize(expenses: Sequence[Expense], payers: Sequence[Payer]) -> MonthSummary:
    """Group-and-sum a month of expenses by payer and by (category, payer).

    Every household payer gets a person total, including those who paid
    nothing. Category/payer pairs are only listed when they have spend.
    """
    # Pass 1: one slot per household payer, in household order.
    person_totals: dict[str, int] = {payer.id: 0 for payer in payers}
    pair_totals: dict[tuple[str, str], int] = defaultdict(int)

    # Pass 2: overwrite with actual sums.
    for expense in expenses:
        if expense.paid_by not in person_totals:
            logger.debug(
                "summary_unknown_payer",
                payer_id=expense.paid_by,
                expense_id=expense.id,
            )
            person_totals[expense.paid_by] = 0
        person_totals[expense.paid_by] += expense.amount_cents
        pair_totals[(expense.category, expense.paid_by)] += expense.amount_cents

    return MonthSummary(
        totals_by_person=tuple(
            PersonTotal(paid_by=payer_id, total=total)
            for payer_id, total in person_totals.items()
        ),
        totals_by_category=tuple(
            CategoryPersonTotal(category=category, paid_by=payer_id, total=total)
            for (category, payer_id), total in sorted(pair_totals.items())
        ),
        grand_total=grand_total(expenses),
    )


def cumulative_spending(
    expenses: Iterable[Expense], month: MonthKey
) -> list[CumulativeDataPoint]:
    """Running total of spend for every calendar day of ``month``.

    Expenses dated outside the month are ignored.
    """
    start, end = month_bounds(month)
    daily: dict[date, int] = defaultdict(int)
    skipped = 0

    for expense in expenses:
        if start <= expense.date <= end:
            daily[expense.date] += expense.amount_cents
        else:
            skipped += 1

    if skipped:
        logger.debug("cumulative_out_of_month", month=month, skipped=skipped)

    points: list[CumulativeDataPoint] = []
    running = 0
    for day in month_days(month):
        running += daily.get(day, 0)
        points.append(CumulativeDataPoint(date=day, cumulative=running))
    return points


def category_breakdown(
    expenses: Sequence[Expense],
    categories: Sequence[Category],
    palette: Sequence[str] | None = None,
) -> list[CategoryBreakdownItem]:
    """Spend per category with share of the month total, largest first.

    Categories without spend are omitted. Fallback colours are handed out by
    position among the categories that do have spend, in category-list order,
    before sorting by amount.
    """
    colors = palette if palette is not None else load_category_palette()
    totals = category_totals(expenses)
    total = grand_total(expenses)

    items: list[CategoryBreakdownItem] = []
    for category in categories:
        amount = totals.get(category.name, 0)
        if amount <= 0:
            continue
        items.append(
            CategoryBreakdownItem(
                name=category.name,
                amount=amount,
                percentage=round_ratio(amount * 100, total) if total > 0 else 0,
                color=pick_color(category, len(items), colors),
            )
        )

    # sorted() is stable: equal amounts keep category-list order.
    return sorted(items, key=lambda item: item.amount, reverse=True)
