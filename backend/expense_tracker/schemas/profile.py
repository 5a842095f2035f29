from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from .transaction import normalize_currency


class ProfileResponse(BaseModel):
    """A user's primary currency and monthly salary."""
    monthly_salary: Decimal
    currency: str

    class Config:
        from_attributes = True


class SalaryUpdate(BaseModel):
    monthly_salary: Decimal = Field(ge=0, decimal_places=2)


class CurrencyUpdate(BaseModel):
    currency: str

    @field_validator("currency")
    @classmethod
    def currency_code(cls, value: str) -> str:
        return normalize_currency(value)
