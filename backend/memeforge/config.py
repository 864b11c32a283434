from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API Keys
    MISTRAL_API_KEY: Optional[str] = None

    # Model settings
    MISTRAL_MODEL: str = "mistral-small-latest"

    # Server
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    APP_LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True
    )

    @property
    def provider_configured(self) -> bool:
        return bool(self.MISTRAL_API_KEY)


@lru_cache
def get_settings() -> Settings:
    """Settings are read once at startup and never mutated afterwards"""
    return Settings()
