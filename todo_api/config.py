from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Todo API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)
    api_prefix: str = ""

    # Frontend origins allowed to call the API
    cors_origins: List[str] = ["http://localhost:3000"]

    default_page_limit: int = Field(10, ge=0)
    log_level: str = "INFO"
    health_message: str = "Simple CRUD API for todos"

    model_config = SettingsConfigDict(
        env_prefix="TODO_API_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
