import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

# Data directory: use EXPENSE_TRACKER_DATA_DIR if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/expense-tracker for local dev
_data_dir = os.environ.get("EXPENSE_TRACKER_DATA_DIR")
DATA_DIR = Path(_data_dir) if _data_dir else Path.home() / ".config" / "expense-tracker"

ENV_PREFIX = "EXPENSE_TRACKER_"


class Settings(BaseModel):
    """Runtime settings, read from EXPENSE_TRACKER_* environment variables."""
    database_url: str = f"sqlite:///{DATA_DIR / 'expenses.db'}"
    host: str = "127.0.0.1"
    port: int = 8000
    rates_api_url: str = "https://api.exchangerate.host"
    rates_timeout: float = 10.0
    default_currency: str = "USD"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]  # Vite dev server

    @field_validator("default_currency")
    @classmethod
    def upper_currency(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def ensure_data_dir() -> None:
    """Ensure the data directory exists."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def load_settings() -> Settings:
    """Build settings from the environment, ignoring unset variables."""
    values = {}
    for field in Settings.model_fields:
        raw = os.environ.get(ENV_PREFIX + field.upper())
        if raw is not None:
            values[field] = raw
    return Settings(**values)


@lru_cache
def get_settings() -> Settings:
    return load_settings()
