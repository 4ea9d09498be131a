"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).
Editor content (tools, toolsConfig) is NOT read from here; it is passed to
the session as an EditorConfig object.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # TOOLS
    # ========================================================================
    TOOLS_PREPARE_TIMEOUT: float | None = Field(
        default=None,
        description="Per-tool timeout for prepare hooks in seconds (unset = wait forever)",
        gt=0.0,
    )

    # ========================================================================
    # OPENTELEMETRY
    # ========================================================================
    OTEL_EXPORTER_OTLP_ENDPOINT: str = Field(default="http://localhost:4317")
    OTEL_SERVICE_NAME: str = Field(default="codex-core")
    OTEL_TRACES_ENABLED: bool = Field(default=False)

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    # ========================================================================
    # DEPLOYMENT
    # ========================================================================
    ENVIRONMENT: str = Field(
        default="development", pattern="^(development|staging|production)$"
    )
