"""Runtime configuration read from the environment (and ``.env``)."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Admissions API settings.

    Every field maps to an upper-case environment variable of the same name,
    e.g. ``SECRET_KEY`` or ``GENERATED_PASSWORD_LENGTH``. ``DATABASE_URL``, when
    set, wins over the individual ``DB_*`` parts.
    """

    # PostgreSQL
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "admissions"
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")
    db_echo: bool = False
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=10, ge=0)

    # Bearer tokens and generated credentials
    secret_key: str = Field(default="", min_length=32)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(default=60 * 24, gt=0)
    generated_password_length: int = Field(
        default=12,
        ge=8,
        description="Length of passwords generated for agent-registered students.",
    )

    environment: Literal["dev", "prod", "test"] = "dev"
    debug: bool = False
    app_name: str = "Student Admissions API"
    app_version: str = "1.0.0"
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed origins.",
    )
    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        if not v or len(v) < 32:
            raise ValueError(
                "SECRET_KEY must be set in environment and be at least 32 characters long"
            )
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL (asyncpg driver)."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process; tests reset with ``get_settings.cache_clear()``."""
    return Settings()
