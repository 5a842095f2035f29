import enum
import datetime as dt
from decimal import Decimal
from sqlalchemy import String, Integer, Date, Enum
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class TransactionType(enum.Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"


def cents_to_decimal(cents: int) -> Decimal:
    """Integer cents to a two-place Decimal."""
    return Decimal(cents).scaleb(-2)


def decimal_to_cents(value: Decimal) -> int:
    """Two-place Decimal to integer cents."""
    return int((Decimal(value) * 100).to_integral_value())


class Transaction(Base, TimestampMixin):
    """
    An income or expense entry owned by a single user.

    Amounts are stored as integer cents to avoid floating point issues.
    The amount is always recorded as entered; `type` carries the direction.
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Owner (opaque identifier issued by the auth provider)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Core fields
    type: Mapped[TransactionType] = mapped_column(
        Enum(TransactionType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    note: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    @property
    def amount(self) -> Decimal:
        """Get amount as a decimal."""
        return cents_to_decimal(self.amount_cents)

    @amount.setter
    def amount(self, value: Decimal) -> None:
        """Set amount from a decimal."""
        self.amount_cents = decimal_to_cents(value)

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, date={self.date}, type={self.type.value}, "
            f"amount={self.amount} {self.currency}, category='{self.category}')>"
        )
