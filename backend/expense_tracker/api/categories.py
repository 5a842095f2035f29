from fastapi import APIRouter

from ..schemas import CategoryOptions
from ..services import EXPENSE_CATEGORIES, INCOME_CATEGORIES

router = APIRouter()


@router.get("/", response_model=CategoryOptions)
def list_categories():
    """Get the suggested category labels for each transaction type."""
    return CategoryOptions(income=INCOME_CATEGORIES, expense=EXPENSE_CATEGORIES)
