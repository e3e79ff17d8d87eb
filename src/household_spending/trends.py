"""Month-over-month and multi-month derivations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import structlog

from household_spending.aggregation import category_totals, grand_total, pick_color
from household_spending.config import load_category_palette
from household_spending.dates import month_key, month_label, previous_month
from household_spending.models import (
    Category,
    CategoryTrend,
    CategoryTrendEntry,
    ChangeDirection,
    Expense,
    MonthChange,
    MonthKey,
    MonthlyTotal,
)
from household_spending.money import round_ratio

logger = structlog.get_logger(__name__)


def month_change(current: int, previous: int) -> MonthChange:
    """Percentage change from ``previous`` to ``current``.

    A zero previous month is defined rather than an error: no spend in either
    month is flat, any spend after an empty month counts as a 100% increase.
    """
    if previous == 0:
        if current == 0:
            return MonthChange(percent_change=0, direction=ChangeDirection.FLAT)
        return MonthChange(percent_change=100, direction=ChangeDirection.UP)

    percent = round_ratio((current - previous) * 100, previous)

    if abs(percent) < 1:
        return MonthChange(percent_change=0, direction=ChangeDirection.FLAT)

    return MonthChange(
        percent_change=abs(percent),
        direction=ChangeDirection.UP if percent > 0 else ChangeDirection.DOWN,
    )


def group_by_month(
    expenses: Iterable[Expense], months: Sequence[MonthKey]
) -> dict[MonthKey, list[Expense]]:
    """Bucket a range query result into the requested months.

    Every requested month is present, possibly empty. Expenses falling in a
    month that was not requested are dropped.
    """
    grouped: dict[MonthKey, list[Expense]] = {month: [] for month in months}
    dropped = 0
    for expense in expenses:
        bucket = grouped.get(month_key(expense.date))
        if bucket is None:
            dropped += 1
            continue
        bucket.append(expense)

    if dropped:
        logger.debug("group_by_month_dropped", months=len(grouped), dropped=dropped)
    return grouped


def monthly_totals(
    by_month: Mapping[MonthKey, Sequence[Expense]],
) -> list[MonthlyTotal]:
    """Total spend per supplied month, in ascending month order."""
    return [
        MonthlyTotal(
            month=month,
            label=month_label(month),
            total=grand_total(by_month[month]),
        )
        for month in sorted(by_month)
    ]


def category_trends(
    by_month: Mapping[MonthKey, Sequence[Expense]],
    categories: Sequence[Category],
    palette: Sequence[str] | None = None,
) -> list[CategoryTrend]:
    """Per-month totals for every household category.

    Each month lists all categories (0 where there was no spend) so charts
    keep a stable legend. Fallback colours follow the category's position in
    the full category list.
    """
    colors = palette if palette is not None else load_category_palette()
    trends: list[CategoryTrend] = []

    for month in sorted(by_month):
        totals = category_totals(by_month[month])
        trends.append(
            CategoryTrend(
                month=month,
                label=month_label(month),
                categories=tuple(
                    CategoryTrendEntry(
                        name=category.name,
                        total=totals.get(category.name, 0),
                        color=pick_color(category, index, colors),
                    )
                    for index, category in enumerate(categories)
                ),
            )
        )
    return trends


def compare_with_previous(
    by_month: Mapping[MonthKey, Sequence[Expense]], month: MonthKey
) -> MonthChange:
    """Change between ``month`` and the month before it.

    A month missing from ``by_month`` counts as having no spend.
    """
    current = grand_total(by_month.get(month, ()))
    previous = grand_total(by_month.get(previous_month(month), ()))
    return month_change(current, previous)
