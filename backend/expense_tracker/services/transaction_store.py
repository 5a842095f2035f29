from sqlalchemy.orm import Session

from ..logger import get_logger
from ..models import Transaction
from ..schemas import TransactionCreate, TransactionUpdate

logger = get_logger(__name__)

EXPENSE_CATEGORIES = [
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Bills & Utilities",
    "Healthcare",
    "Education",
    "Travel",
    "Other",
]

INCOME_CATEGORIES = [
    "Salary",
    "Freelance",
    "Investment",
    "Business",
    "Gift",
    "Other",
]


class TransactionStore:
    """Transaction records, always scoped to the owning user."""

    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: str) -> list[Transaction]:
        """All of a user's transactions, newest date first."""
        return (
            self.db.query(Transaction)
            .filter(Transaction.user_id == user_id)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .all()
        )

    def get(self, user_id: str, transaction_id: int) -> Transaction | None:
        return self.db.query(Transaction).filter(
            Transaction.id == transaction_id,
            Transaction.user_id == user_id,
        ).first()

    def create(self, user_id: str, data: TransactionCreate) -> Transaction:
        transaction = Transaction(
            user_id=user_id,
            type=data.type,
            amount=data.amount,
            category=data.category,
            date=data.date,
            currency=data.currency,
            note=data.note,
        )
        self.db.add(transaction)
        self.db.flush()
        self.db.refresh(transaction)
        logger.info(f"Added {transaction.type.value} #{transaction.id} for user {user_id}")
        return transaction

    def update(self, transaction: Transaction, data: TransactionUpdate) -> Transaction:
        update_data = data.model_dump(exclude_unset=True)

        # Only note may be cleared; the other columns are required
        for field, value in update_data.items():
            if value is None and field != "note":
                continue
            setattr(transaction, field, value)

        self.db.flush()
        self.db.refresh(transaction)
        logger.info(f"Updated transaction #{transaction.id} for user {transaction.user_id}")
        return transaction

    def delete(self, transaction: Transaction) -> None:
        self.db.delete(transaction)
        self.db.flush()
        logger.info(f"Deleted transaction #{transaction.id} for user {transaction.user_id}")
