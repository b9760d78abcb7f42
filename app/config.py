"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/vocabquad.log if not set."""
        return self.log_file_path or self.data_dir / "vocabquad.log"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "vocabquad.db"

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4.1-mini"
    llm_timeout: float = 120.0

    # Local storage
    saved_words_key: str = "vocabulary-quadrant-saved-words"


settings = Settings()
