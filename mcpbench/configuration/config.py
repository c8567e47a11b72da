"""Configuration management for mcpbench."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # MCP client identity sent during the initialize handshake
    mcp_client_name: str = Field(default="mcpbench", alias="MCP_CLIENT_NAME")
    mcp_client_version: str = Field(default="1.0.0", alias="MCP_CLIENT_VERSION")

    # MCP timeouts (seconds)
    mcp_connect_timeout: float = Field(
        default=30.0, alias="MCP_CONNECT_TIMEOUT"
    )  # stdio and streamable HTTP only; SSE connects without a deadline
    mcp_ping_timeout: float = Field(default=5.0, alias="MCP_PING_TIMEOUT")
    mcp_http_timeout: float = Field(default=30.0, alias="MCP_HTTP_TIMEOUT")
    mcp_sse_read_timeout: float = Field(default=300.0, alias="MCP_SSE_READ_TIMEOUT")

    # Pagination safeguards (unbounded unless set)
    mcp_pagination_max_pages: int | None = Field(
        default=None, alias="MCP_PAGINATION_MAX_PAGES", ge=1
    )
    mcp_pagination_detect_cycles: bool = Field(
        default=False, alias="MCP_PAGINATION_DETECT_CYCLES"
    )

    # OpenTelemetry
    service_name: str = Field(default="mcpbench", alias="SERVICE_NAME")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    otel_exporter_otlp_endpoint: str | None = Field(
        default=None, alias="OTEL_EXPORTER_OTLP_ENDPOINT"
    )
    otel_metric_export_interval: int = Field(
        default=60000, alias="OTEL_METRIC_EXPORT_INTERVAL"
    )  # milliseconds
    enable_telemetry: bool = Field(default=True, alias="ENABLE_TELEMETRY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator(
        "mcp_connect_timeout",
        "mcp_ping_timeout",
        "mcp_http_timeout",
        "mcp_sse_read_timeout",
    )
    @classmethod
    def validate_positive_timeout(cls, value: float) -> float:
        """Timeouts must be strictly positive."""
        if value <= 0:
            raise ValueError("timeout must be greater than zero")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str | None) -> str:
        """Normalize log level value from environment."""
        if value is None:
            return "INFO"
        return str(value).strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
