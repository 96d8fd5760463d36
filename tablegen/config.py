# tablegen/config.py
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


@dataclass
class Settings:
    """Runtime configuration. Environment variables (or a .env file) override the defaults."""

    HOST: str = field(default_factory=lambda: os.environ.get("HOST", "127.0.0.1"))
    PORT: int = field(default_factory=lambda: int(os.environ.get("PORT", "8000")))
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: os.environ.get(
            "CORS_ORIGINS",
            "http://localhost,http://localhost:8501,http://127.0.0.1,http://127.0.0.1:8501",
        ).split(",")
    )
    LOG_LEVEL: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper())

    # Key-value store backing the saved form settings
    SETTINGS_PATH: str = field(default_factory=lambda: os.environ.get("SETTINGS_PATH", "table_settings.json"))
    SAVE_ON_GENERATE: bool = field(default_factory=lambda: _env_bool("SAVE_ON_GENERATE", True))

    # Ceiling on requested table size, generation cost is rows x columns
    MAX_ROWS: int = field(default_factory=lambda: int(os.environ.get("MAX_ROWS", "1000")))
    MAX_COLUMNS: int = field(default_factory=lambda: int(os.environ.get("MAX_COLUMNS", "100")))

    # Used by the Streamlit UI to reach the API
    API_BASE: str = field(default_factory=lambda: os.environ.get("API_BASE", "http://127.0.0.1:8000/api"))


settings = Settings()
