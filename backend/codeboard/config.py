"""
CodeBoard Backend: Application Configuration
=============================================

What:  Centralized configuration using Pydantic Settings.
How:   Values come from environment variables (or a .env file), are
       type-checked and validated once at import, and are exposed through
       the `settings` singleton.
Who:   Imported by every module that needs a configuration value.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults; production deployments should at
    least set CORS_ORIGINS.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="CodeBoard Language API")

    # ── Language Detection ────────────────────────────────────────────────
    # plain: "Python"   emoji: "🐍 Python" (legacy snippet cards)
    label_style: str = Field(default="plain")

    # Upper bound on snippet content accepted for detection. Matches the
    # snippet content column limit of the notes store.
    max_content_length: int = Field(default=100_000, ge=1_000, le=1_000_000)

    @field_validator("label_style")
    @classmethod
    def validate_label_style(cls, v: str) -> str:
        """Ensures the default label style is one the formatter knows."""
        lower = v.lower()
        if lower not in {"plain", "emoji"}:
            raise ValueError(f"Invalid label_style '{v}'. Must be 'plain' or 'emoji'")
        return lower

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; the web client and the API run on different origins.
    cors_origins: str = Field(default="http://localhost:5173,http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

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
        "case_sensitive": False,
    }


settings = Settings()
