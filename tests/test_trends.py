"""Tests for month-over-month change and multi-month trends."""

from datetime import date

import pytest

from household_spending.models import (
    Category,
    CategoryTrendEntry,
    ChangeDirection,
    MonthChange,
    MonthlyTotal,
)
from household_spending.trends import (
    category_trends,
    compare_with_previous,
    group_by_month,
    month_change,
    monthly_totals,
)

PALETTE = ("bg-accent-primary", "bg-accent-success", "bg-accent-warning")


class TestMonthChange:
    @pytest.mark.parametrize(
        ("current", "previous", "expected"),
        [
            (0, 0, MonthChange(0, ChangeDirection.FLAT)),
            (5000, 0, MonthChange(100, ChangeDirection.UP)),
            (11200, 10000, MonthChange(12, ChangeDirection.UP)),
            (9200, 10000, MonthChange(8, ChangeDirection.DOWN)),
            (10040, 10000, MonthChange(0, ChangeDirection.FLAT)),
            (10000, 10000, MonthChange(0, ChangeDirection.FLAT)),
            (0, 10000, MonthChange(100, ChangeDirection.DOWN)),
            (30000, 10000, MonthChange(200, ChangeDirection.UP)),
        ],
    )
    def test_rules(self, current, previous, expected):
        assert month_change(current, previous) == expected

    def test_half_percent_rounds_up_to_one(self):
        # +0.5% rounds to 1 and is no longer flat
        assert month_change(10050, 10000) == MonthChange(1, ChangeDirection.UP)

    def test_negative_half_percent_is_flat(self):
        # -0.5% rounds toward zero, so it stays flat
        assert month_change(9950, 10000) == MonthChange(0, ChangeDirection.FLAT)

    def test_percent_change_is_never_negative(self):
        result = month_change(1000, 10000)
        assert result.percent_change == 90
        assert result.direction is ChangeDirection.DOWN

    def test_direction_serialises_as_string(self):
        assert month_change(2, 1).direction == "up"


class TestMonthlyTotals:
    def test_totals_per_month(self, make_expense):
        by_month = {
            "2025-01": [make_expense(1000), make_expense(2000)],
            "2025-02": [make_expense(3000, on=date(2025, 2, 1))],
        }

        assert monthly_totals(by_month) == [
            MonthlyTotal(month="2025-01", label="Jan", total=3000),
            MonthlyTotal(month="2025-02", label="Feb", total=3000),
        ]

    def test_empty_month(self):
        assert monthly_totals({"2025-01": []}) == [
            MonthlyTotal(month="2025-01", label="Jan", total=0)
        ]

    def test_sorted_by_month_key(self, make_expense):
        by_month = {"2025-01": [], "2024-12": [make_expense(100)], "2024-11": []}

        result = monthly_totals(by_month)

        assert [item.month for item in result] == ["2024-11", "2024-12", "2025-01"]
        assert [item.label for item in result] == ["Nov", "Dec", "Jan"]

    def test_does_not_infer_missing_months(self):
        result = monthly_totals({"2025-01": [], "2025-04": []})
        assert [item.month for item in result] == ["2025-01", "2025-04"]


class TestCategoryTrends:
    def test_totals_per_category_per_month(self, make_expense):
        by_month = {
            "2025-01": [
                make_expense(1000, category="Groceries"),
                make_expense(2000, category="Rent"),
            ],
            "2025-02": [make_expense(1500, on=date(2025, 2, 3), category="Groceries")],
        }
        categories = [
            Category(id="1", name="Groceries", color="bg-accent-primary"),
            Category(id="2", name="Rent", color="bg-accent-success"),
        ]

        result = category_trends(by_month, categories, palette=PALETTE)

        assert [trend.month for trend in result] == ["2025-01", "2025-02"]
        assert result[0].categories == (
            CategoryTrendEntry("Groceries", 1000, "bg-accent-primary"),
            CategoryTrendEntry("Rent", 2000, "bg-accent-success"),
        )
        assert result[1].total_for("Rent") == 0
        assert result[1].total_for("Groceries") == 1500

    def test_every_category_in_every_month(self, make_expense):
        categories = [Category(id=str(i), name=name) for i, name in enumerate("abcd")]
        by_month = {"2025-01": [make_expense(100, category="b")], "2025-02": []}

        result = category_trends(by_month, categories, palette=PALETTE)

        for trend in result:
            assert [entry.name for entry in trend.categories] == ["a", "b", "c", "d"]
        assert [entry.total for entry in result[1].categories] == [0, 0, 0, 0]

    def test_fallback_colour_follows_full_category_list(self, make_expense):
        categories = [
            Category(id="1", name="Groceries"),
            Category(id="2", name="Rent"),
            Category(id="3", name="Dining", color="bg-custom"),
            Category(id="4", name="Travel"),
        ]
        by_month = {"2025-01": [make_expense(100, category="Travel")]}

        colors = [entry.color for entry in category_trends(by_month, categories, palette=PALETTE)[0].categories]

        assert colors == [
            "bg-accent-primary",
            "bg-accent-success",
            "bg-custom",
            "bg-accent-primary",
        ]

    def test_colours_are_stable_across_months(self, make_expense):
        categories = [Category(id="1", name="Groceries"), Category(id="2", name="Rent")]
        by_month = {
            "2025-01": [make_expense(100, category="Rent")],
            "2025-02": [make_expense(100, on=date(2025, 2, 1), category="Groceries")],
        }

        result = category_trends(by_month, categories, palette=PALETTE)

        assert result[0].categories[1].color == result[1].categories[1].color


class TestGroupByMonth:
    def test_buckets_and_keeps_empty_months(self, make_expense):
        jan = make_expense(100, on=date(2025, 1, 31))
        feb = make_expense(200, on=date(2025, 2, 1))

        result = group_by_month([jan, feb], ["2025-01", "2025-02", "2025-03"])

        assert result == {"2025-01": [jan], "2025-02": [feb], "2025-03": []}

    def test_drops_unrequested_months(self, make_expense):
        result = group_by_month([make_expense(100, on=date(2024, 12, 31))], ["2025-01"])
        assert result == {"2025-01": []}

    def test_no_months(self, make_expense):
        assert group_by_month([make_expense()], []) == {}


class TestCompareWithPrevious:
    def test_uses_previous_calendar_month(self, make_expense):
        by_month = {
            "2024-12": [make_expense(10000, on=date(2024, 12, 5))],
            "2025-01": [make_expense(11200)],
        }

        assert compare_with_previous(by_month, "2025-01") == MonthChange(12, ChangeDirection.UP)

    def test_missing_previous_month_counts_as_zero(self, make_expense):
        by_month = {"2025-01": [make_expense(500)]}
        assert compare_with_previous(by_month, "2025-01") == MonthChange(100, ChangeDirection.UP)
