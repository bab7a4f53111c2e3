"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a seeded menu on port 3000 without any setup.
Override values via environment variables before importing this
module, or pass a custom ``Settings`` instance to ``create_app``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Menu Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # Whether the request logging middleware prints POST/PUT bodies.
    log_request_bodies: bool = _env_flag("LOG_REQUEST_BODIES", "true")

    # Load the built-in sample menu into the store at startup.
    seed_menu: bool = _env_flag("SEED_MENU", "true")

    # HTTP status used for validation failures.  Existing clients of the
    # menu service expect 200 with an ``errors`` body; set this to 400
    # for a conventional contract.
    validation_error_status: int = int(os.getenv("VALIDATION_ERROR_STATUS", "200"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
