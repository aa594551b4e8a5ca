"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite file and console logging when
nothing is configured.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Rental Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the SQLite file holding the four record stores.  A relative
    # path is resolved against the project root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "rental_registry.db")


# Environment variables must be set before this module is imported.
settings = Settings()
