from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from ..logger import get_logger
from ..schemas import ProfileResponse, SalaryUpdate, CurrencyUpdate
from ..services import ProfileStore
from .deps import current_user_id, get_profile_store

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_model=ProfileResponse)
def get_profile(
    user_id: str = Depends(current_user_id),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Get the user's salary and primary currency."""
    return profiles.get_or_create(user_id)


@router.put("/salary", response_model=ProfileResponse)
def update_salary(
    body: SalaryUpdate,
    user_id: str = Depends(current_user_id),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Set the monthly salary, in the profile's currency."""
    try:
        return profiles.update_salary(user_id, body.monthly_salary)
    except SQLAlchemyError as e:
        logger.error(f"Failed to update salary for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update salary")


@router.put("/currency", response_model=ProfileResponse)
def update_currency(
    body: CurrencyUpdate,
    user_id: str = Depends(current_user_id),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Change the primary currency. The salary amount is kept as is."""
    try:
        return profiles.update_currency(user_id, body.currency)
    except SQLAlchemyError as e:
        logger.error(f"Failed to update currency for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update currency")
