import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cornerstones.assessments.constants import DOMINANT_THRESHOLD


def _load_required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


class Settings(BaseSettings):
    """Strongly typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="4 Cornerstones API")
    environment: Literal["dev", "test", "staging", "prod"] = Field(default="dev")
    database_url: str = Field(default="sqlite+pysqlite:///./cornerstones.db")

    jwt_secret_key: str = Field(default_factory=lambda: _load_required_env("JWT_SECRET_KEY"), min_length=8, description="Symmetric key for HS256 JWT signing")
    jwt_algorithm: Literal["HS256"] = Field(default="HS256")
    jwt_issuer: str = Field(default="cornerstones-api")
    jwt_audience: str = Field(default="cornerstones-users")
    access_token_expire_minutes: int = Field(default=60, ge=1)

    run_startup_ddl: bool = Field(default=True)

    questionnaire_path: Optional[Path] = Field(default=None, description="Override for the bundled VARK questionnaire YAML")
    dominant_style_threshold: int = Field(default=DOMINANT_THRESHOLD, ge=0, le=100)

    content_transform_base_url: Optional[HttpUrl] = Field(default=None)
    content_transform_timeout_ms: int = Field(default=30_000, ge=100)
    content_transform_api_key: Optional[str] = Field(default=None)
    content_transform_default_subject: str = Field(default="Course Material")

    # Database connection pooling settings
    db_pool_size: int = Field(default=5, ge=1, le=50, description="Number of connections to keep in the pool")
    db_max_overflow: int = Field(default=10, ge=0, le=100, description="Max connections to create beyond pool_size")
    db_pool_timeout: int = Field(default=30, ge=1, le=300, description="Seconds to wait for connection from pool")
    db_pool_recycle: int = Field(default=3600, ge=300, description="Seconds before recycling a connection")
    db_pool_pre_ping: bool = Field(default=True, description="Enable connection health checks before use")

    debug_instrumentation_enabled: bool = Field(default=True)

    @field_validator("content_transform_base_url", mode="before")
    @classmethod
    def _normalize_blank_url(cls, value: object) -> Optional[str | HttpUrl]:
        if value in (None, "", b""):
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        raise TypeError("CONTENT_TRANSFORM_BASE_URL must be a URL string")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
