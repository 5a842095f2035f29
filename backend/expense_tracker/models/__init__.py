from .base import Base, TimestampMixin
from .transaction import Transaction, TransactionType, cents_to_decimal, decimal_to_cents
from .profile import Profile

__all__ = [
    "Base",
    "TimestampMixin",
    "Transaction",
    "TransactionType",
    "cents_to_decimal",
    "decimal_to_cents",
    "Profile",
]
