"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables instead of relying on ``pydantic_settings``.
Defaults are provided for all fields, so the service starts with no
environment at all and listens on port 3000.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Books Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset, logs only go to the console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Largest JSON request body accepted by the body parser, in bytes.
    # Matches the 100kb default of express.json().
    max_body_bytes: int = int(os.getenv("MAX_BODY_BYTES", str(100 * 1024)))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
