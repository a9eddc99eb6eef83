"""Settings for Todos Server, read from environment variables."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ... import __version__


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings."""

    def __init__(self):
        # Application
        self.APP_NAME = os.getenv("APP_NAME", "Todos Service")
        self.APP_VERSION = os.getenv("APP_VERSION", __version__)
        self.APP_ENVIRONMENT = os.getenv("APP_ENVIRONMENT", "development")

        # API
        self.API_HOST = os.getenv("API_HOST", "0.0.0.0")
        self.API_PORT = int(os.getenv("API_PORT", "8080"))
        self.API_DEBUG = _env_bool("API_DEBUG")

        # Timeouts (seconds)
        self.REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "5.0"))
        self.KEEP_ALIVE_TIMEOUT = int(os.getenv("KEEP_ALIVE_TIMEOUT", "10"))
        self.SHUTDOWN_TIMEOUT = int(os.getenv("SHUTDOWN_TIMEOUT", "10"))

        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FORMAT = os.getenv("LOG_FORMAT", "default")
        log_file = os.getenv("LOG_FILE")
        self.LOG_FILE: Optional[Path] = Path(log_file) if log_file else None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
