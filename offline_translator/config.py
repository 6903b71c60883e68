"""Application configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from offline_translator.application.language_detector import MIN_DETECTION_CONFIDENCE

DATA_DIR = Path.home() / ".offline_translator"


class Settings(BaseSettings):
    """Application settings loaded from environment variables (OFFLINE_TRANSLATOR_*) or .env."""

    # Application
    app_name: str = "Offline Translator"
    app_version: str = "1.0.0"

    # Language pickers start with these selections
    default_source_language: str = "English"
    default_target_language: str = "Indonesian"

    # Detection
    detection_min_confidence: float = MIN_DETECTION_CONFIDENCE

    # History
    history_enabled: bool = True
    history_database_url: str = f"sqlite:///{DATA_DIR / 'history.db'}"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # UI
    translate_shortcut: str = "Ctrl+Return"
    i18n_dir: Path = Path("i18n")

    model_config = SettingsConfigDict(
        env_prefix="OFFLINE_TRANSLATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
