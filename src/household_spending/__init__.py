"""Household Spending - analytics engine for a shared expense tracker."""

__version__ = "0.1.0"

from household_spending.aggregation import (
    category_breakdown,
    category_totals,
    cumulative_spending,
    grand_total,
    summarize,
)
from household_spending.balance import fair_shares, payer_balance, settlement
from household_spending.config import configure_logging, get_settings
from household_spending.models import (
    Category,
    CategoryBreakdownItem,
    CategoryPersonTotal,
    CategoryTrend,
    CategoryTrendEntry,
    ChangeDirection,
    CumulativeDataPoint,
    Expense,
    MonthChange,
    MonthKey,
    MonthlyTotal,
    MonthSummary,
    Payer,
    PayerBalance,
    PersonTotal,
    Settlement,
)
from household_spending.report import MonthReport, build_month_report
from household_spending.trends import (
    category_trends,
    compare_with_previous,
    group_by_month,
    month_change,
    monthly_totals,
)

__all__ = [
    # Version
    "__version__",
    # Records
    "Expense",
    "Category",
    "Payer",
    "MonthKey",
    # Aggregates
    "PersonTotal",
    "CategoryPersonTotal",
    "MonthSummary",
    "CumulativeDataPoint",
    "CategoryBreakdownItem",
    "ChangeDirection",
    "MonthChange",
    "PayerBalance",
    "Settlement",
    "MonthlyTotal",
    "CategoryTrend",
    "CategoryTrendEntry",
    # Month aggregation
    "summarize",
    "cumulative_spending",
    "category_breakdown",
    "category_totals",
    "grand_total",
    # Trends
    "month_change",
    "monthly_totals",
    "category_trends",
    "group_by_month",
    "compare_with_previous",
    # Balance
    "fair_shares",
    "payer_balance",
    "settlement",
    # Report
    "MonthReport",
    "build_month_report",
    # Config
    "get_settings",
    "configure_logging",
]
