"""Runtime settings, read from the environment and an optional .env file."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TODO_API_", env_file=".env", extra="ignore")

    title: str = "TODO API"
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "info"


@lru_cache
def get_settings() -> Settings:
    return Settings()
