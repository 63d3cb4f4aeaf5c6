"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    host: str = "0.0.0.0"
    port: int = 8080

    fetch_timeout_seconds: float = Field(default=10.0, gt=0)
    history_size: int = Field(default=10, ge=1)
    link_resolution: Literal["naive", "standard"] = "naive"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
