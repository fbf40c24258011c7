"""
typeid_sdk.tier0_core.config
────────────────────────────────
Typed configuration with env layering. Reads from .env → environment
variables. All fields are typed via Pydantic; invalid values fail when the
config is first loaded, not at the point of use.

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TypeIDConfig(BaseSettings):
    """
    Typed SDK configuration. All env vars are prefixed with TYPEID_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Application ───────────────────────────────────────────────────────────
    environment: str = Field(default="development", alias="TYPEID_ENV")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="TYPEID_LOG_LEVEL")
    log_format: Literal["json", "console"] = Field(default="json", alias="TYPEID_LOG_FORMAT")

    # ── Integrations ──────────────────────────────────────────────────────────
    orm_storage: Literal["uuid", "text"] = Field(default="uuid", alias="TYPEID_ORM_STORAGE")
    mcp_server_name: str = Field(default="typeid-sdk", alias="TYPEID_MCP_SERVER_NAME")

    @field_validator("environment")
    @classmethod
    def validate_env(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "test"}
        if v.lower() not in allowed:
            raise ValueError(f"environment must be one of {allowed}, got {v!r}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got {v!r}")
        return v.upper()

    @field_validator("log_format", "orm_storage", mode="before")
    @classmethod
    def lowercase(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


@lru_cache(maxsize=1)
def get_config() -> TypeIDConfig:
    """
    Return the singleton SDK config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    return TypeIDConfig()


def _reset_config() -> None:
    """For tests — clear the config cache."""
    get_config.cache_clear()
