# /schoolhub/core/config.py

"""
Central runtime configuration for the SchoolHub API.

Values are read once at import time from the process environment. A local
`.env` file is honoured for development so the same code runs unchanged on
the hosted deployment, where the variables are injected by the platform.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        # The second argument is the default for local development.
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./schoolhub.db")
        self.CORS_ORIGINS: List[str] = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]
        self.ENABLE_DEBUG_ROUTES: bool = _as_bool(os.getenv("ENABLE_DEBUG_ROUTES", "false"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Page sizes used by the message board listing.
        self.GENERAL_THREAD_LIMIT: int = int(os.getenv("GENERAL_THREAD_LIMIT", "20"))
        self.CLASSROOM_THREAD_LIMIT: int = int(os.getenv("CLASSROOM_THREAD_LIMIT", "50"))


settings = Settings()
