from decimal import Decimal
from sqlalchemy.orm import Session

from ..logger import get_logger
from ..models import Profile

logger = get_logger(__name__)


class ProfileStore:
    """One preferences record per user."""

    def __init__(self, db: Session, default_currency: str = "USD"):
        self.db = db
        self.default_currency = default_currency

    def get(self, user_id: str) -> Profile | None:
        return self.db.query(Profile).filter(Profile.user_id == user_id).first()

    def get_or_create(self, user_id: str) -> Profile:
        """Fetch the user's profile, creating a zero-salary one on first use."""
        profile = self.get(user_id)
        if profile is None:
            profile = Profile(
                user_id=user_id,
                monthly_salary_cents=0,
                currency=self.default_currency,
            )
            self.db.add(profile)
            self.db.flush()
            self.db.refresh(profile)
            logger.info(f"Created profile for user {user_id}")
        return profile

    def default_profile(self, user_id: str) -> Profile:
        """An unsaved profile used when the stored one cannot be read."""
        return Profile(user_id=user_id, monthly_salary_cents=0, currency=self.default_currency)

    def update_salary(self, user_id: str, monthly_salary: Decimal) -> Profile:
        profile = self.get_or_create(user_id)
        profile.monthly_salary = monthly_salary
        self.db.flush()
        logger.info(f"Updated monthly salary for user {user_id}")
        return profile

    def update_currency(self, user_id: str, currency: str) -> Profile:
        profile = self.get_or_create(user_id)
        profile.currency = currency
        self.db.flush()
        logger.info(f"Updated currency for user {user_id} to {currency}")
        return profile
