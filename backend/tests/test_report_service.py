from datetime import date
from decimal import Decimal

from expense_tracker.services.report_service import (
    month_label,
    monthly_trends,
    report_overview,
    spending_by_category,
)

from tests.helpers import make_tx


def test_month_label():
    assert month_label(2025, 1) == "Jan 2025"
    assert month_label(2024, 12) == "Dec 2024"


def test_spending_by_category_ignores_income_and_currency():
    transactions = [
        make_tx("expense", 20, "USD", "Shopping"),
        make_tx("expense", 30, "EUR", "Food & Dining"),
        make_tx("expense", 15, "USD", "Food & Dining"),
        make_tx("income", 500, "USD", "Salary"),
    ]

    result = spending_by_category(transactions)

    assert [(c.category, c.total) for c in result] == [
        ("Food & Dining", Decimal("45")),
        ("Shopping", Decimal("20")),
    ]


def test_monthly_trends_keeps_last_six_months_ascending():
    # Newest first, as the store returns them
    transactions = [
        make_tx("expense", 10, on=date(2025, month, 5)) for month in range(8, 0, -1)
    ]
    transactions.append(make_tx("income", 100, on=date(2025, 8, 1)))

    result = monthly_trends(transactions)

    assert len(result) == 6
    assert [m.month for m in result] == [
        "Mar 2025", "Apr 2025", "May 2025", "Jun 2025", "Jul 2025", "Aug 2025",
    ]
    assert result[-1].total_income == 100
    assert result[-1].total_expenses == 10


def test_monthly_trends_orders_across_years():
    transactions = [
        make_tx("income", 1, on=date(2025, 1, 3)),
        make_tx("expense", 2, on=date(2024, 12, 30)),
        make_tx("expense", 4, on=date(2024, 12, 1)),
    ]

    result = monthly_trends(transactions)

    assert [m.month for m in result] == ["Dec 2024", "Jan 2025"]
    assert result[0].total_expenses == 6


def test_monthly_trends_empty():
    assert monthly_trends([]) == []


def test_report_overview_ratios():
    transactions = [
        make_tx("income", 500),
        make_tx("expense", 300),
    ]

    overview = report_overview(transactions, Decimal("1000"))

    assert overview.available_funds == 1500
    assert overview.expense_ratio == Decimal("20.0")
    assert overview.savings_rate == Decimal("80.0")
    assert overview.average_daily_spending == Decimal("10.00")


def test_report_overview_without_funds():
    overview = report_overview([], 0)

    assert overview.available_funds == 0
    assert overview.expense_ratio == 0
    assert overview.savings_rate == 0
    assert overview.average_daily_spending == 0
