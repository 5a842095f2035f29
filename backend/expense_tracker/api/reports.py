from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import ReportResponse
from ..services import ProfileStore, monthly_trends, report_overview, spending_by_category
from .deps import current_user_id, fetch_user_data, get_profile_store

router = APIRouter()


@router.get("/", response_model=ReportResponse)
def get_reports(
    user_id: str = Depends(current_user_id),
    db: Session = Depends(get_db),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """Category breakdown, the last six months and headline ratios."""
    transactions, profile, notices = fetch_user_data(db, profiles, user_id)

    return ReportResponse(
        currency=profile.currency,
        overview=report_overview(transactions, profile.monthly_salary),
        categories=spending_by_category(transactions),
        monthly=monthly_trends(transactions),
        notices=notices,
    )
