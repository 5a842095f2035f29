from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_db
from ..logger import get_logger
from ..models import Profile, Transaction
from ..services import ExchangeRateClient, ProfileStore, TransactionStore

logger = get_logger(__name__)


def current_user_id(x_user_id: str | None = Header(None)) -> str:
    """The authenticated user's id, forwarded by the auth layer."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not authenticated")
    return x_user_id.strip()


def get_rate_client(request: Request) -> ExchangeRateClient:
    """FastAPI dependency for the shared exchange rate client."""
    return request.app.state.rate_client


def get_profile_store(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ProfileStore:
    return ProfileStore(db, default_currency=settings.default_currency)


def fetch_user_data(
    db: Session,
    profiles: ProfileStore,
    user_id: str,
) -> tuple[list[Transaction], Profile, list[str]]:
    """
    Load a user's transactions and profile for a read-only view.

    Store failures are logged and replaced by defaults (no transactions,
    zero salary) with a notice for the user, so the view still renders.
    """
    notices = []

    try:
        transactions = TransactionStore(db).list_for_user(user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching transactions for user {user_id}: {e}")
        db.rollback()
        transactions = []
        notices.append("Could not load transactions.")

    try:
        profile = profiles.get(user_id) or profiles.default_profile(user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching profile for user {user_id}: {e}")
        db.rollback()
        profile = profiles.default_profile(user_id)
        notices.append("Could not load profile.")

    return transactions, profile, notices
