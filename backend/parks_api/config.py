"""
National Parks API — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory and the catalog loader.
When:  Loaded once at module import time.

The defaults reproduce the fixed deployment: both catalogs under ./data,
listener on all interfaces, port 8080. Environment variables only exist to
point a test run or a container at different files.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults matching the production layout; nothing is
    required to be set.
    """

    # ── Catalog Files ─────────────────────────────────────────────────────
    # Relative paths resolve against the process working directory.
    parks_file: str = Field(
        default="./data/parks.json",
        description="JSON array of park records loaded at startup",
    )
    states_file: str = Field(
        default="./data/states.json",
        description="JSON array of state records loaded at startup",
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list, "*" allows any origin.
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PARKS_FILE and parks_file both work
    }


# Singleton instance — configuration is immutable after startup
settings = Settings()
