"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Secrets should be provided via environment variables, not config files.

## Required Environment Variables

- SECRET_KEY: Symmetric key used to sign bearer tokens (min 32 chars)

## Optional Environment Variables

- DATABASE_URL: SQLAlchemy async connection string
  (default: sqlite+aiosqlite:///./city_info.db)
- AUTH_ISSUER / AUTH_AUDIENCE: Token issuer and audience
- FILES_DIR: Directory holding the downloadable file
- UPLOAD_DIR: Directory uploaded files are written to
- DEBUG: Enable debug mode and the OpenAPI docs (default: false)

## Example .env file

```
SECRET_KEY=your-secret-key-at-least-32-characters
DATABASE_URL=sqlite+aiosqlite:///./city_info.db
AUTH_ISSUER=https://localhost:8000
AUTH_AUDIENCE=cityinfoapi
```
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "City Info API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Authentication
    secret_key: str = Field(
        ...,
        min_length=32,
        description="Symmetric key for signing bearer tokens (min 32 chars)",
    )
    auth_issuer: str = "https://localhost:8000"
    auth_audience: str = "cityinfoapi"
    access_token_lifetime_seconds: int = Field(default=60 * 60, ge=1)  # 1 hour

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./city_info.db",
        description="SQLAlchemy async connection string",
    )
    database_pool_size: int = Field(default=5, ge=1, le=50)
    database_max_overflow: int = Field(default=10, ge=0, le=50)
    database_echo: bool = False  # Log SQL queries
    database_create_tables: bool = True
    database_seed: bool = True

    # Cities paging
    default_cities_page_size: int = Field(default=10, ge=1)
    max_cities_page_size: int = Field(default=20, ge=1)

    # Files
    files_dir: Path = Path(".")
    download_file_name: str = "getting-acquainted-with-aspnet-core-slides.pdf"
    upload_dir: Path = Path(".")
    max_upload_size_bytes: int = Field(default=20 * 1024 * 1024, ge=1)  # 20 MiB
    allowed_upload_content_type: str = "application/pdf"

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Ensure the database URL uses an async driver."""
        if v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def download_file_path(self) -> Path:
        """Location of the single file served by the download endpoint."""
        return self.files_dir / self.download_file_name


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
