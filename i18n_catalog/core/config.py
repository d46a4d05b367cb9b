"""
Application configuration for the translation catalog service.

Strongly-typed settings using Pydantic v2 BaseSettings. Defaults target
local/dev usage; values can be overridden via environment variables or a
.env file at the project root.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# This file is i18n_catalog/core/config.py → PACKAGE_DIR is .../i18n_catalog
PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables (.env supported)."""

    # Load from .env at repo root; ignore unknown variables to keep flexibility
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # -------------------------------------------------------------------------
    # Core application info
    # -------------------------------------------------------------------------
    APP_NAME: str = "Translation Catalog"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # -------------------------------------------------------------------------
    # Internationalization / Localization
    # -------------------------------------------------------------------------
    # Directory scanned recursively for <code>.json catalogs
    I18N_DIR: Path = PACKAGE_DIR / "locales"
    DEFAULT_LOCALE: str = "en"
    # Cookie remembering an explicit ?lang= choice
    LOCALE_COOKIE: str = "lang"

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------
    TEMPLATES_DIR: Path = PACKAGE_DIR / "templates"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance (singleton-like)."""
    return Settings()
