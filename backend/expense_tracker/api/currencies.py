from decimal import Decimal
from fastapi import APIRouter, Depends, Query

from ..schemas import (
    CurrencyResponse,
    FormattedAmount,
    RatesResponse,
    ConversionResponse,
)
from ..services import CURRENCIES, ExchangeRateClient, currency_symbol, format_currency
from .deps import get_rate_client

router = APIRouter()


@router.get("/", response_model=list[CurrencyResponse])
def list_currencies():
    """Get the currencies offered for selection."""
    return list(CURRENCIES)


@router.get("/format", response_model=FormattedAmount)
def format_amount(
    amount: Decimal = Query(...),
    currency: str = Query("USD"),
):
    """Render an amount the way the dashboard shows it."""
    currency = currency.strip().upper()
    return FormattedAmount(
        amount=amount,
        currency=currency,
        formatted=format_currency(amount, currency),
        symbol=currency_symbol(currency),
    )


@router.get("/rates", response_model=RatesResponse)
async def get_rates(
    base: str = Query("USD"),
    client: ExchangeRateClient = Depends(get_rate_client),
):
    """Latest exchange rates. `available` is false when the rate service fails."""
    rates = await client.fetch_rates(base)
    if rates is None:
        return RatesResponse(base=base, available=False)
    return RatesResponse(base=base, available=True, rates=rates)


@router.get("/convert", response_model=ConversionResponse)
async def convert_amount(
    amount: Decimal = Query(...),
    from_currency: str = Query(..., alias="from"),
    to_currency: str = Query(..., alias="to"),
    client: ExchangeRateClient = Depends(get_rate_client),
):
    """Convert an amount. `available` is false when the rate service fails."""
    result = await client.convert(amount, from_currency, to_currency)
    return ConversionResponse(
        from_currency=from_currency,
        to_currency=to_currency,
        amount=amount,
        available=result is not None,
        result=result,
    )
