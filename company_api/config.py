"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - sites is non-empty and free of duplicates

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: runs out-of-the-box on a local SQLite file
    - reassign_site_on_update defaults to True (every save re-shards the record)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from company_api.core.domain_types import DEFAULT_SITES


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./companies.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    create_tables_on_startup: bool = False

    # Sharding
    sites: list[str] = list(DEFAULT_SITES)
    site_selection_seed: int | None = None
    reassign_site_on_update: bool = True

    @field_validator("sites")
    @classmethod
    def validate_sites(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("sites must contain at least one site")
        if len(set(v)) != len(v):
            raise ValueError("sites must not contain duplicates")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
