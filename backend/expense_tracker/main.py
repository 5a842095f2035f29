from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .config import ensure_data_dir, get_settings
from .database import close_db, init_db, is_db_initialized
from .logger import configure_logging, get_logger
from .services import ExchangeRateClient

logger = get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    configure_logging(settings.log_level)
    if not is_db_initialized():
        if settings.database_url.startswith("sqlite:///"):
            ensure_data_dir()
        init_db(settings.database_url)
    app.state.rate_client = ExchangeRateClient(
        base_url=settings.rates_api_url,
        timeout=settings.rates_timeout,
    )
    logger.info("Expense Tracker started")
    yield
    # Cleanup on shutdown
    await app.state.rate_client.aclose()
    close_db()


app = FastAPI(
    title="Expense Tracker",
    description="Personal income and expense tracking with multi-currency summaries",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
