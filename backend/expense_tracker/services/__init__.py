from .currency import Currency, CURRENCIES, get_currency, format_currency, currency_symbol
from .exchange_rates import ExchangeRateClient
from .summary_service import summarize, split_primary
from .report_service import spending_by_category, monthly_trends, report_overview
from .transaction_store import TransactionStore, EXPENSE_CATEGORIES, INCOME_CATEGORIES
from .profile_store import ProfileStore

__all__ = [
    "Currency",
    "CURRENCIES",
    "get_currency",
    "format_currency",
    "currency_symbol",
    "ExchangeRateClient",
    "summarize",
    "split_primary",
    "spending_by_category",
    "monthly_trends",
    "report_overview",
    "TransactionStore",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "ProfileStore",
]
