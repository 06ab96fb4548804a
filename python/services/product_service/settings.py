"""Runtime configuration read from the environment and an optional .env file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    title: str = Field(default="Product Service")
    version: str = Field(default="0.3.0")
    products_file: str = Field(default="products.json")
    host: str = Field(default="localhost")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    return Settings()
