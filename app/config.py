"""
Application configuration using pydantic-settings.
Loads values from .env file in project root.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database settings
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "weddingguestbook"
    db_user: str = "guestbook"
    db_password: str = ""

    # Full SQLAlchemy URL, takes precedence over the db_* fields (e.g. sqlite:///./guestbook.db)
    database_url_override: str = ""

    # Application settings
    host: str = "127.0.0.1"
    port: int = 3001
    debug: bool = False
    log_level: str = "INFO"
    auto_create_schema: bool = False

    # Front-end dev servers allowed to call the API
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    @property
    def database_url(self) -> str:
        """Generate SQLAlchemy database URL."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
