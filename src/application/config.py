"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "bookshelf-api"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server settings; PORT follows the usual hosting convention
    host: str = "localhost"
    port: int = 9000
    reload: bool = False

    # Logging
    log_level: str = "INFO"


# Create a singleton instance
settings = Settings()
