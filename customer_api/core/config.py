# customer_api/core/config.py
"""
Application settings read from environment variables.

``load_settings`` is called by ``create_app`` rather than at import time,
so tests can point the app at a throwaway database with ``monkeypatch``.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


@dataclass(frozen=True)
class Settings:
    project_name: str = "Customer API"
    api_version: str = "0.1.0"
    database_url: str = "sqlite:///customers.sqlite"  # file in project root
    db_echo: bool = False
    log_level: str = "INFO"
    log_file: str = ""
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    origins = [o.strip() for o in _getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        project_name=_getenv("PROJECT_NAME", "Customer API"),
        api_version=_getenv("API_VERSION", "0.1.0"),
        database_url=_getenv("DATABASE_URL", "sqlite:///customers.sqlite"),
        db_echo=_getenv("DB_ECHO", "false").lower() in {"1", "true", "yes"},
        log_level=_getenv("LOG_LEVEL", "INFO"),
        log_file=_getenv("LOG_FILE", ""),
        cors_origins=origins or ["*"],
    )
