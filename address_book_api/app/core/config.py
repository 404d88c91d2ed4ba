"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; override them via
environment variables before importing this module.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Address Book API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the versioned router is mounted.  Empty by
    # default so that the collection lives at ``/contacts``.
    api_prefix: str = os.getenv("API_PREFIX", "").rstrip("/")
    contacts_path: str = os.getenv("CONTACTS_PATH", "/contacts").rstrip("/")

    # Address used by ``run.py`` when serving the app with uvicorn.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8282"))

    @property
    def person_base_path(self) -> str:
        """Path that every person ``href`` is built from."""
        return f"{self.api_prefix}{self.contacts_path}/person"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
