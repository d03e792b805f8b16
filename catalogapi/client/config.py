"""Client configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..endpoints import BASE_URL


class ClientSettings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOGAPI_",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    base_url: str = Field(
        default=BASE_URL,
        description="Scheme and host of the product API",
    )

    # Credentials sent by the login command
    username: str = Field(default="emilys", description="Username for login")
    password: str = Field(default="emilyspass", description="Password for login")

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format string",
    )


def get_settings() -> ClientSettings:
    """Get the client settings instance."""
    return ClientSettings()
