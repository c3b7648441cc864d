"""Application settings with Pydantic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration.

    Every field can be set through a ``RATINGS_``-prefixed environment
    variable or a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="RATINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = ""
    db_user: str = "ratings"
    db_password: str = "ratings"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "ratings"
    db_sslmode: str = "disable"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    # Persistence backend
    store_backend: Literal["postgres", "memory"] = "postgres"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    default_page_size: int = 10

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    metrics_enabled: bool = True

    @property
    def dsn(self) -> str:
        """Connection string, assembled from the ``db_*`` parts unless
        ``database_url`` is set explicitly."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
            f"?sslmode={self.db_sslmode}"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
