"""Application settings read from JOINERY_* environment variables."""

from __future__ import annotations
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_PREFIX = "JOINERY_"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    log_level: str = "INFO"
    log_json: bool = False               # JSON lines for production log shipping
    seed_sample_data: bool = True        # demo project on startup
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    quote_signature: str = "Tom"
    currency_symbol: str = "£"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        # Comma separated in the environment
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value
