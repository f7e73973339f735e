"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection parameters come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - database_max_connections bounds live connections; no overflow beyond it

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://agency:agency@db:5432/digital_marketing_db"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Pool — 0 queue limit means callers may queue without bound
    database_max_connections: int = Field(10, ge=1)
    database_queue_limit: int = Field(0, ge=0)
    database_wait_for_connections: bool = True
    database_pool_timeout: float = Field(30.0, gt=0)

    # API
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 5000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
