from fastapi import APIRouter

from .transactions import router as transactions_router
from .categories import router as categories_router
from .profile import router as profile_router
from .dashboard import router as dashboard_router
from .reports import router as reports_router
from .currencies import router as currencies_router

api_router = APIRouter()

api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(profile_router, prefix="/profile", tags=["profile"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(reports_router, prefix="/reports", tags=["reports"])
api_router.include_router(currencies_router, prefix="/currencies", tags=["currencies"])
