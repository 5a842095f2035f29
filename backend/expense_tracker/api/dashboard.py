from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import CurrencySummary, CurrencySummaryDisplay, DashboardResponse, TransactionResponse
from ..services import ProfileStore, format_currency, split_primary, summarize
from .deps import current_user_id, fetch_user_data, get_profile_store

router = APIRouter()

RECENT_COUNT = 5


def _display(summary: CurrencySummary) -> CurrencySummaryDisplay:
    return CurrencySummaryDisplay(
        **summary.model_dump(),
        total_income_display=format_currency(summary.total_income, summary.currency),
        total_expenses_display=format_currency(summary.total_expenses, summary.currency),
        balance_display=format_currency(summary.balance, summary.currency),
    )


@router.get("/", response_model=DashboardResponse)
def get_dashboard(
    user_id: str = Depends(current_user_id),
    db: Session = Depends(get_db),
    profiles: ProfileStore = Depends(get_profile_store),
):
    """
    Per-currency totals for the dashboard.

    The primary currency carries the monthly salary; every other currency
    the user has transactions in is listed in `secondary`.
    """
    transactions, profile, notices = fetch_user_data(db, profiles, user_id)

    summaries = summarize(transactions, profile.currency, profile.monthly_salary)
    primary, secondary = split_primary(summaries, profile.currency)

    return DashboardResponse(
        currency=profile.currency,
        monthly_salary=profile.monthly_salary,
        monthly_salary_display=format_currency(profile.monthly_salary, profile.currency),
        primary=_display(primary),
        secondary=[_display(s) for s in secondary],
        recent_transactions=[
            TransactionResponse.model_validate(tx) for tx in transactions[:RECENT_COUNT]
        ],
        notices=notices,
    )
