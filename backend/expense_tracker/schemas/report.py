from decimal import Decimal
from pydantic import BaseModel


class CategoryTotal(BaseModel):
    category: str
    total: Decimal


class MonthlyTotal(BaseModel):
    month: str
    total_income: Decimal
    total_expenses: Decimal


class ReportOverview(BaseModel):
    total_income: Decimal
    total_expenses: Decimal
    available_funds: Decimal
    expense_ratio: Decimal
    savings_rate: Decimal
    average_daily_spending: Decimal


class ReportResponse(BaseModel):
    currency: str
    overview: ReportOverview
    categories: list[CategoryTotal]
    monthly: list[MonthlyTotal]
    notices: list[str] = []
