from decimal import Decimal
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin
from .transaction import cents_to_decimal, decimal_to_cents


class Profile(Base, TimestampMixin):
    """Per-user preferences: the primary currency and the monthly salary in it."""

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    monthly_salary_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")

    @property
    def monthly_salary(self) -> Decimal:
        """Get the monthly salary as a decimal."""
        return cents_to_decimal(self.monthly_salary_cents or 0)

    @monthly_salary.setter
    def monthly_salary(self, value: Decimal) -> None:
        self.monthly_salary_cents = decimal_to_cents(value)

    def __repr__(self) -> str:
        return f"<Profile(user_id='{self.user_id}', salary={self.monthly_salary} {self.currency})>"
