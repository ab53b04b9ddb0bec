"""
Casework Coach - Configuration and settings.

Settings are read from the environment (and .env). Only the API keys a
feature actually needs are checked, and only when that feature runs, so the
action engine works without any keys configured.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM providers
    openai_api_key: str | None = None
    perplexity_api_key: str | None = None

    # 211 National Data Platform
    two_one_one_api_key: str | None = None
    two_one_one_url: str = "https://api.211.org/resources/v2/search/keyword"

    # Supabase
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    supabase_service_role_key: str | None = None

    # Knowledge base admin gate
    knowledge_admin_pin: str = "8853"

    # Local data (knowledge base JSON, documents, feedback log)
    data_dir: Path = Path("data")
    playbooks_path: Path | None = None  # None = packaged default table

    # Application
    casework_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # CASEWORK_LOG_PROMPTS=1 - log prompts to local files (dev only)
    casework_log_prompts: bool = False

    @property
    def is_development(self) -> bool:
        return self.casework_env == "development"

    @property
    def knowledge_path(self) -> Path:
        return self.data_dir / "organizational-knowledge.json"

    @property
    def feedback_log_path(self) -> Path:
        return self.data_dir / "feedback.jsonl"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: Settings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
