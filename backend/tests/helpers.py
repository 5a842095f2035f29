from datetime import date
from decimal import Decimal

import httpx

from expense_tracker.models import Transaction, TransactionType
from expense_tracker.services import ExchangeRateClient


def make_tx(tx_type, amount, currency="USD", category="Other", on=date(2025, 1, 15)):
    return Transaction(
        user_id="u1",
        type=TransactionType(tx_type),
        amount=Decimal(str(amount)),
        category=category,
        date=on,
        currency=currency,
    )


class FakeRateService:
    """Stands in for the remote rate API and counts the requests it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": "unavailable"})
        if request.url.path == "/latest":
            return httpx.Response(200, json={"base": request.url.params["base"], "rates": {"EUR": 0.9, "GBP": 0.8}})
        if request.url.path == "/convert":
            amount = Decimal(request.url.params["amount"])
            return httpx.Response(200, json={"result": float(amount * 2)})
        return httpx.Response(404)

    @property
    def calls(self) -> int:
        return len(self.requests)


def make_rate_client(handler) -> ExchangeRateClient:
    return ExchangeRateClient(
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="https://rates.test")
    )
