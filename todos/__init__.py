"""Todos - A minimal task-management HTTP service with in-memory storage."""

__version__ = "0.1.0"
__author__ = "Todos Team"
__description__ = "A minimal task-management HTTP service with in-memory storage"

__all__ = [
    "__version__",
    "__author__",
    "__description__",
]

# Load environment variables as early as possible
import os
from pathlib import Path

from dotenv import load_dotenv


def load_env_file_early() -> None:
    """Load environment variables from .env file at package import time.

    Looks for a .env file in the project root (one level up from this package).

    Note:
        - Existing environment variables take precedence (override=False)
        - Debug output can be enabled via TODOS_DEBUG=true
    """
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"

    if env_file.exists():
        load_dotenv(env_file, override=False)

        if os.getenv("TODOS_DEBUG", "false").lower() == "true":
            print(f"Environment variables loaded from {env_file}")
    elif os.getenv("TODOS_DEBUG", "false").lower() == "true":
        print(f"No .env file found at {env_file}")


load_env_file_early()
