import calendar
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable

from ..schemas import CategoryTotal, MonthlyTotal, ReportOverview
from .summary_service import ZERO, is_income, to_decimal

MONTHS_SHOWN = 6
DAYS_PER_MONTH = 30

CENTS = Decimal("0.01")
TENTHS = Decimal("0.1")
HUNDRED = Decimal("100")


def month_label(year: int, month: int) -> str:
    """Short month and four-digit year, e.g. "Jan 2025"."""
    return f"{calendar.month_abbr[month]} {year}"


def spending_by_category(transactions: Iterable[Any]) -> list[CategoryTotal]:
    """Expense totals per category, largest first. Currency is ignored."""
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for tx in transactions:
        if not is_income(tx):
            totals[tx.category] += to_decimal(tx.amount)

    return [
        CategoryTotal(category=category, total=total)
        for category, total in sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    ]


def monthly_trends(
    transactions: Iterable[Any],
    months: int = MONTHS_SHOWN,
) -> list[MonthlyTotal]:
    """
    Income and expenses per calendar month, oldest first.

    Only the latest `months` months that have transactions are returned.
    Currency is ignored.
    """
    totals: dict[tuple[int, int], list[Decimal]] = {}
    for tx in transactions:
        entry = totals.setdefault((tx.date.year, tx.date.month), [ZERO, ZERO])
        if is_income(tx):
            entry[0] += to_decimal(tx.amount)
        else:
            entry[1] += to_decimal(tx.amount)

    keys = sorted(totals)[-months:] if months > 0 else []
    return [
        MonthlyTotal(
            month=month_label(year, month),
            total_income=totals[(year, month)][0],
            total_expenses=totals[(year, month)][1],
        )
        for year, month in keys
    ]


def _percent(part: Decimal, whole: Decimal) -> Decimal:
    if whole <= 0:
        return ZERO
    return (part / whole * HUNDRED).quantize(TENTHS, rounding=ROUND_HALF_UP)


def report_overview(
    transactions: Iterable[Any],
    monthly_salary: Decimal | int | float = ZERO,
) -> ReportOverview:
    """Headline ratios for the reports page, across all currencies."""
    total_income = ZERO
    total_expenses = ZERO
    has_expenses = False
    for tx in transactions:
        if is_income(tx):
            total_income += to_decimal(tx.amount)
        else:
            total_expenses += to_decimal(tx.amount)
            has_expenses = True

    available = to_decimal(monthly_salary) + total_income
    if has_expenses:
        daily = (total_expenses / DAYS_PER_MONTH).quantize(CENTS, rounding=ROUND_HALF_UP)
    else:
        daily = ZERO

    return ReportOverview(
        total_income=total_income,
        total_expenses=total_expenses,
        available_funds=available,
        expense_ratio=_percent(total_expenses, available),
        savings_rate=_percent(available - total_expenses, available),
        average_daily_spending=daily,
    )
