from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from micro_obs.infrastructure.observability.logger_factory_service import LOG_LEVELS


def validate_port(value: int) -> int:
    if not 0 <= value <= 65535:
        raise ValueError(f"Invalid port {value}")
    return value


class ServiceSettings(BaseSettings):
    """Settings shared by the item and order services."""

    service_name: str = "micro-obs"
    log_level: str = Field(default="info", alias="LOG_LEVEL")
    app_env: str = Field(default="local", alias="APP_ENV")
    log_format: str | None = Field(default=None, alias="LOG_FORMAT")
    otel_console_export: bool = Field(default=False, alias="OTEL_CONSOLE_EXPORT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {sorted(LOG_LEVELS)}, got {value!r}")
        return level

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
