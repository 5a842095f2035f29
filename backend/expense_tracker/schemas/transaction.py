import datetime as dt
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from ..models.transaction import TransactionType


def normalize_currency(value: str) -> str:
    """Currency codes are three ASCII letters, stored upper-case."""
    code = value.strip().upper()
    if len(code) != 3 or not code.isascii() or not code.isalpha():
        raise ValueError("currency must be a 3-letter code")
    return code


class TransactionBase(BaseModel):
    """Base transaction fields."""
    type: TransactionType
    amount: Decimal = Field(ge=0, decimal_places=2)
    category: str
    date: dt.date = Field(default_factory=dt.date.today)
    currency: str = "USD"
    note: str | None = None

    @field_validator("category")
    @classmethod
    def category_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("category is required")
        return value

    @field_validator("currency")
    @classmethod
    def currency_code(cls, value: str) -> str:
        return normalize_currency(value)

    @field_validator("note")
    @classmethod
    def blank_note(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class TransactionCreate(TransactionBase):
    """Fields for creating a transaction."""
    pass


class TransactionUpdate(BaseModel):
    """Fields for updating a transaction (all optional)."""
    type: TransactionType | None = None
    amount: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    category: str | None = None
    date: dt.date | None = None
    currency: str | None = None
    note: str | None = None

    @field_validator("category")
    @classmethod
    def category_required(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("category is required")
        return value

    @field_validator("currency")
    @classmethod
    def currency_code(cls, value: str | None) -> str | None:
        return normalize_currency(value) if value is not None else None

    @field_validator("note")
    @classmethod
    def blank_note(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class TransactionResponse(BaseModel):
    """Transaction response with all fields."""
    id: int
    type: TransactionType
    amount: Decimal
    category: str
    date: dt.date
    currency: str
    note: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class CategoryOptions(BaseModel):
    """Suggested category labels per transaction type."""
    income: list[str]
    expense: list[str]
