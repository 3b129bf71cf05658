"""
Notekeeper — Application Configuration
========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a default `settings` object.
Who:   Read by the application factory, logging setup and the uvicorn runner.
When:  Loaded once at module import time. Tests build their own Settings
       instance and hand it to create_app().
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local use. Attributes are grouped
    by concern.
    """

    # ── Storage ───────────────────────────────────────────────────────────
    # What: Path of the single JSON document holding every note
    # Created (with parent directories) on first access if missing
    notes_file: str = Field(
        default="./notes.json",
        description="Path to the JSON document backing the note collection",
    )

    # ── Frontend ──────────────────────────────────────────────────────────
    # What: Optional directory of pre-built static frontend files
    # When set and existing, it is served at "/" alongside the API
    frontend_dir: Optional[str] = Field(default=None)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1024, le=65535)

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
        "case_sensitive": False,  # NOTES_FILE and notes_file both work
    }


# Default instance, used when create_app() is called without explicit settings
settings = Settings()
