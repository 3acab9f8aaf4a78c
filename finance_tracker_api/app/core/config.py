"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service layer can be imported and tested without any environment set
up.  In a production deployment you should override these via
environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Finance Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file written alongside console output.
    log_file: str = os.getenv("LOG_FILE", "")

    # SQLAlchemy database URL.  Relative SQLite paths are resolved
    # against the current working directory by SQLAlchemy itself.
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///finance_tracker.db")

    # Echo every emitted SQL statement through the ``sqlalchemy.engine`` logger.
    db_echo: bool = os.getenv("DB_ECHO", "false").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
