"""
Per-currency dashboard totals.

Transactions are grouped by their own currency; nothing is converted. The
monthly salary belongs to the profile's currency and is folded into that
currency's balance only.
"""

from decimal import Decimal
from typing import Any, Iterable

from ..schemas import CurrencySummary

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Coerce a stored or user-supplied amount to Decimal without float drift."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def is_income(transaction: Any) -> bool:
    """Accepts either a TransactionType member or its plain string value."""
    tx_type = getattr(transaction.type, "value", transaction.type)
    return tx_type == "income"


def summarize(
    transactions: Iterable[Any],
    primary_currency: str,
    monthly_salary: Decimal | int | float = ZERO,
) -> dict[str, CurrencySummary]:
    """
    Total income, expenses and balance per currency.

    The primary currency always has an entry, even with no transactions in it,
    so its balance (at least the salary) can be shown. Input is not validated
    or modified.
    """
    totals: dict[str, list[Decimal]] = {}

    for tx in transactions:
        entry = totals.setdefault(tx.currency, [ZERO, ZERO])
        if is_income(tx):
            entry[0] += to_decimal(tx.amount)
        else:
            entry[1] += to_decimal(tx.amount)

    totals.setdefault(primary_currency, [ZERO, ZERO])
    salary = to_decimal(monthly_salary)

    summaries = {}
    for code, (income, expenses) in totals.items():
        balance = income - expenses
        if code == primary_currency:
            balance += salary
        summaries[code] = CurrencySummary(
            currency=code,
            total_income=income,
            total_expenses=expenses,
            balance=balance,
        )
    return summaries


def split_primary(
    summaries: dict[str, CurrencySummary],
    primary_currency: str,
) -> tuple[CurrencySummary, list[CurrencySummary]]:
    """The primary entry, and the rest ordered by currency code."""
    secondary = [
        summaries[code] for code in sorted(summaries) if code != primary_currency
    ]
    return summaries[primary_currency], secondary
