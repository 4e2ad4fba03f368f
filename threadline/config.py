"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseModel):
    """Storage substrate configuration."""

    # Type tag for comment records (versioned structured data)
    type_tag: int = Field(default=500, ge=0)


class IdentitySettings(BaseModel):
    """Identity configuration."""

    # Display name used as the owner of new comments
    # When unset, writing comments fails with NoUserNameError
    display_name: str | None = None


class APISettings(BaseModel):
    """API configuration."""

    host: str = "localhost"
    port: int = 8000


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nesting:

        ENVIRONMENT=production
        STORAGE__TYPE_TAG=500
        IDENTITY__DISPLAY_NAME=alice
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__TYPE_TAG syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    api: APISettings = APISettings()
    storage: StorageSettings = StorageSettings()
    identity: IdentitySettings = IdentitySettings()
    observability: ObservabilitySettings = ObservabilitySettings()
