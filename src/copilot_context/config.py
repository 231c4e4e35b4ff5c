"""Configuration module for copilot-context using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CopilotContextSettings(BaseSettings):
    """Main configuration settings for copilot-context.

    All settings can be overridden via environment variables with the COPILOT_ prefix.
    For example, COPILOT_CONTEXT_INDENT will override the context_indent setting.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    # Context tree: spaces per depth level in the flattened context string
    context_indent: int = Field(default=3, ge=0)

    model_config = SettingsConfigDict(env_prefix="COPILOT_")
