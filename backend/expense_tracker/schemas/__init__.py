from .transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    CategoryOptions,
    normalize_currency,
)
from .profile import ProfileResponse, SalaryUpdate, CurrencyUpdate
from .summary import CurrencySummary, CurrencySummaryDisplay, DashboardResponse
from .report import CategoryTotal, MonthlyTotal, ReportOverview, ReportResponse
from .currency import CurrencyResponse, FormattedAmount, RatesResponse, ConversionResponse

__all__ = [
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "CategoryOptions",
    "normalize_currency",
    "ProfileResponse",
    "SalaryUpdate",
    "CurrencyUpdate",
    "CurrencySummary",
    "CurrencySummaryDisplay",
    "DashboardResponse",
    "CategoryTotal",
    "MonthlyTotal",
    "ReportOverview",
    "ReportResponse",
    "CurrencyResponse",
    "FormattedAmount",
    "RatesResponse",
    "ConversionResponse",
]
