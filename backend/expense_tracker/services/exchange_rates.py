"""
Client for the remote exchange rate service.

Best effort only: any transport, status or payload problem is logged and
reported as None, never raised. There are no retries.
"""

from decimal import Decimal, InvalidOperation

import httpx

from ..logger import get_logger
from .summary_service import to_decimal

logger = get_logger(__name__)

_PAYLOAD_ERRORS = (ValueError, KeyError, TypeError, AttributeError, InvalidOperation)


class ExchangeRateClient:
    def __init__(
        self,
        base_url: str = "https://api.exchangerate.host",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_rates(self, base_currency: str = "USD") -> dict[str, Decimal] | None:
        """
        Latest rates against `base_currency`.

        Returns:
            Mapping of currency code to rate, or None if unavailable.
        """
        try:
            response = await self._client.get("/latest", params={"base": base_currency})
            response.raise_for_status()
            rates = response.json()["rates"]
            return {code: to_decimal(rate) for code, rate in rates.items()}
        except httpx.HTTPError as e:
            logger.error(f"Error fetching exchange rates for {base_currency}: {e}")
        except _PAYLOAD_ERRORS as e:
            logger.error(f"Malformed exchange rate response for {base_currency}: {e!r}")
        return None

    async def convert(
        self,
        amount: Decimal | int | float,
        from_currency: str,
        to_currency: str,
    ) -> Decimal | None:
        """
        Convert an amount between currencies.

        Same-currency conversion returns the amount unchanged without a request.
        """
        if from_currency == to_currency:
            return amount

        try:
            response = await self._client.get(
                "/convert",
                params={"from": from_currency, "to": to_currency, "amount": str(amount)},
            )
            response.raise_for_status()
            result = response.json()["result"]
            if result is None:
                raise ValueError("no result")
            return to_decimal(result)
        except httpx.HTTPError as e:
            logger.error(f"Error converting {from_currency} to {to_currency}: {e}")
        except _PAYLOAD_ERRORS as e:
            logger.error(f"Malformed conversion response for {from_currency} to {to_currency}: {e!r}")
        return None
