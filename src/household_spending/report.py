"""Dashboard report assembly for a single month."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from household_spending.aggregation import (
    category_breakdown,
    cumulative_spending,
    grand_total,
    summarize,
)
from household_spending.balance import payer_balance, settlement
from household_spending.config.settings import ShareStrategy
from household_spending.models import (
    Category,
    CategoryBreakdownItem,
    CumulativeDataPoint,
    Expense,
    MonthChange,
    MonthKey,
    MonthSummary,
    Payer,
    PayerBalance,
    Settlement,
)
from household_spending.trends import month_change

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MonthReport:
    """Everything the month dashboard renders, computed from one snapshot."""

    month: MonthKey
    summary: MonthSummary
    cumulative: tuple[CumulativeDataPoint, ...]
    breakdown: tuple[CategoryBreakdownItem, ...]
    change: MonthChange
    balances: tuple[PayerBalance, ...]
    settlement: Settlement | None


def build_month_report(
    month: MonthKey,
    current: Sequence[Expense],
    previous: Sequence[Expense],
    categories: Sequence[Category],
    payers: Sequence[Payer],
    *,
    palette: Sequence[str] | None = None,
    strategy: ShareStrategy | None = None,
) -> MonthReport:
    """Compute the month dashboard from the current and previous month's expenses.

    Args:
        month: Month being reported.
        current: Live expenses dated within ``month``.
        previous: Live expenses of the month before, used only for the change badge.
        categories: Full household category list.
        payers: Full household payer list.
        palette: Fallback colours; defaults to the configured palette.
        strategy: Fair-share strategy; defaults to settings.

    Returns:
        Frozen report; inputs are left untouched.
    """
    log = logger.bind(month=month)

    summary = summarize(current, payers)
    balances = payer_balance(current, payers, strategy=strategy)
    report = MonthReport(
        month=month,
        summary=summary,
        cumulative=tuple(cumulative_spending(current, month)),
        breakdown=tuple(category_breakdown(current, categories, palette=palette)),
        change=month_change(summary.grand_total, grand_total(previous)),
        balances=tuple(balances),
        settlement=settlement(balances),
    )

    log.debug(
        "month_report_built",
        expenses=len(current),
        grand_total=summary.grand_total,
        categories=len(report.breakdown),
        settled=report.settlement is None,
    )
    return report
