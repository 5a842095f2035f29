"""
Currency catalog and display formatting.

The catalog is a fixed table of common currencies. Formatting is locale-aware
through Babel; codes Babel does not recognise fall back to
``symbol + grouped number`` so callers always get a display string.
"""

from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.core import LOCALE_ALIASES
from babel.numbers import (
    UnknownCurrencyError,
    format_currency as babel_format_currency,
    format_decimal,
    validate_currency,
)

DEFAULT_LOCALE = "en-US"
FALLBACK_PATTERN = "#,##0.00"


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str
    locale: str


CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "US Dollar", "$", "en-US"),
    Currency("EUR", "Euro", "€", "de-DE"),
    Currency("GBP", "British Pound", "£", "en-GB"),
    Currency("JPY", "Japanese Yen", "¥", "ja-JP"),
    Currency("INR", "Indian Rupee", "₹", "en-IN"),
    Currency("CAD", "Canadian Dollar", "C$", "en-CA"),
    Currency("AUD", "Australian Dollar", "A$", "en-AU"),
    Currency("CHF", "Swiss Franc", "CHF", "de-CH"),
    Currency("CNY", "Chinese Yuan", "¥", "zh-CN"),
    Currency("SEK", "Swedish Krona", "kr", "sv-SE"),
    Currency("NZD", "New Zealand Dollar", "NZ$", "en-NZ"),
    Currency("MXN", "Mexican Peso", "$", "es-MX"),
    Currency("SGD", "Singapore Dollar", "S$", "en-SG"),
    Currency("HKD", "Hong Kong Dollar", "HK$", "en-HK"),
    Currency("NOK", "Norwegian Krone", "kr", "no-NO"),
    Currency("ZAR", "South African Rand", "R", "en-ZA"),
    Currency("BRL", "Brazilian Real", "R$", "pt-BR"),
    Currency("KRW", "South Korean Won", "₩", "ko-KR"),
    Currency("PLN", "Polish Zloty", "zł", "pl-PL"),
    Currency("THB", "Thai Baht", "฿", "th-TH"),
)

_BY_CODE = {currency.code: currency for currency in CURRENCIES}


def get_currency(code: str) -> Currency | None:
    """Look up a catalog entry by code. Returns None for unknown codes."""
    return _BY_CODE.get(code)


@lru_cache(maxsize=None)
def _resolve_locale(tag: str) -> Locale:
    try:
        return Locale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError):
        pass

    # Macro-language tags such as "no" are only known under an alias (nb_NO)
    alias = LOCALE_ALIASES.get(tag.split("-")[0])
    if alias:
        try:
            return Locale.parse(alias)
        except (UnknownLocaleError, ValueError):
            pass
    return Locale.parse(DEFAULT_LOCALE, sep="-")


def locale_for(code: str) -> Locale:
    """The display locale for a currency, or the generic default."""
    currency = get_currency(code)
    return _resolve_locale(currency.locale if currency else DEFAULT_LOCALE)


def format_currency(amount: Decimal | int | float, currency_code: str = "USD") -> str:
    """
    Format an amount for display in the given currency.

    Always renders exactly two fraction digits. If the code is not a currency
    Babel knows, renders the catalog symbol (or the code itself) followed by
    the number grouped for the currency's locale.
    """
    currency_code = currency_code.strip().upper()
    locale = locale_for(currency_code)
    amount = Decimal(str(amount))

    try:
        validate_currency(currency_code)
        return babel_format_currency(
            amount, currency_code, locale=locale, currency_digits=False
        )
    except UnknownCurrencyError:
        # Fallback formatting if currency is not supported
        return f"{currency_symbol(currency_code)}{format_decimal(amount, format=FALLBACK_PATTERN, locale=locale)}"


def currency_symbol(currency_code: str = "USD") -> str:
    """Get the catalog symbol for a currency, or the code unchanged."""
    currency_code = currency_code.strip().upper()
    currency = get_currency(currency_code)
    return currency.symbol if currency else currency_code
