from decimal import Decimal
from pydantic import BaseModel

from .transaction import TransactionResponse


class CurrencySummary(BaseModel):
    """Totals for one currency. Derived on every request, never stored."""
    currency: str
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal

    class Config:
        frozen = True


class CurrencySummaryDisplay(CurrencySummary):
    """A summary with its amounts rendered for display."""
    total_income_display: str
    total_expenses_display: str
    balance_display: str


class DashboardResponse(BaseModel):
    currency: str
    monthly_salary: Decimal
    monthly_salary_display: str
    primary: CurrencySummaryDisplay
    secondary: list[CurrencySummaryDisplay]
    recent_transactions: list[TransactionResponse]
    notices: list[str] = []
