"""Configuration management for the Try-On Studio."""

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings


class ConfigurationError(RuntimeError):
    """Raised when the studio cannot be configured (e.g. missing credential)."""


class GeminiConfig(BaseModel):
    """Gemini image generation settings."""
    model: str = "gemini-2.5-flash-image-preview"
    response_modalities: list[str] = Field(default_factory=lambda: ["IMAGE", "TEXT"])


class ServerConfig(BaseModel):
    """HTTP server settings."""
    host: str = "127.0.0.1"
    port: int = 8000


class StudioConfig(BaseSettings):
    """Main studio configuration."""

    # Credential (loaded from .env or the process environment)
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "api_key"),
    )

    # Sub-configs
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    download_filename: str = "virtual-try-on.png"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = ""
        env_nested_delimiter = "__"
        extra = "ignore"


def load_config() -> StudioConfig:
    """Load configuration from environment and defaults.

    Raises:
        ConfigurationError: If no Gemini credential is configured.
    """
    config = StudioConfig()
    if not config.api_key:
        raise ConfigurationError("GEMINI_API_KEY environment variable not set")
    return config
