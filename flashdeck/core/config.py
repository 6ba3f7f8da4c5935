from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Base
    APP_ENV: str = "dev"  # dev | staging | prod | test
    APP_NAME: str = "Flashdeck"
    APP_VERSION: str = "0.1.0"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Storage (local key-value store)
    STORAGE_PATH: str = "./storage"

    # Logging
    LOG_LEVEL: str = "INFO"

    # OpenAI
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    CHAT_MAX_TOKENS: int = 500
    CHAT_TEMPERATURE: float = 0.7
    DEFINITION_MAX_TOKENS: int = 100
    DEFINITION_TEMPERATURE: float = 0.7

    # Study view
    DEFAULT_LAYOUT: str = "default"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
