"""Application configuration via Pydantic Settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./database.db"

    @model_validator(mode="after")
    def fix_database_url(self) -> "Settings":
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        url = self.DATABASE_URL
        if url.startswith("sqlite://"):
            self.DATABASE_URL = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return self

    # App
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Frontend
    FRONTEND_URL: str = "http://localhost:3000"
    STATIC_DIR: str = "public"  # Served at "/" when the directory exists


settings = Settings()
