"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, after loading a ``.env`` file from the project
root if one exists.  Defaults are provided for all fields so the
service starts without any configuration; in a deployment you should
at least override ``MONGODB_URI`` and ``PORT``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Repository root (the directory holding ``run.py`` and ``frontend/``).
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

# Values from a project-root ``.env`` (or the file named by ``ENV_FILE``)
# fill in anything the process environment does not already set.
load_dotenv(os.getenv("ENV_FILE", str(PROJECT_ROOT / ".env")))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blood Bank API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Connection string for MongoDB.  When the URI does not name a
    # database, ``database_name`` is used instead.
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017/blood_bank")
    database_name: str = os.getenv("DATABASE_NAME", "blood_bank")
    server_selection_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Directory containing the pre-built frontend bundle (``index.html``
    # and its assets).
    frontend_dir: str = os.getenv("FRONTEND_DIR", str(PROJECT_ROOT / "frontend"))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows all.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` as a list, ignoring blank entries."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
