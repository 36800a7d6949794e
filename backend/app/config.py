"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # LLM
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_temperature: float = 0.7
    use_mock_generator: bool = True

    # Export
    exports_dir: Path = Path("exports")

    # Logging
    log_level: str = "INFO"

    # UI
    ui_origin: str = "http://localhost:8501"
    backend_url: str = "http://localhost:3001"
    share_query_param: str = "trip"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
