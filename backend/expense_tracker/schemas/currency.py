from decimal import Decimal
from pydantic import BaseModel


class CurrencyResponse(BaseModel):
    code: str
    name: str
    symbol: str
    locale: str

    class Config:
        from_attributes = True


class FormattedAmount(BaseModel):
    amount: Decimal
    currency: str
    formatted: str
    symbol: str


class RatesResponse(BaseModel):
    base: str
    available: bool
    rates: dict[str, Decimal] = {}


class ConversionResponse(BaseModel):
    from_currency: str
    to_currency: str
    amount: Decimal
    available: bool
    result: Decimal | None = None
