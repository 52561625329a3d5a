from pydantic import Field, field_validator

from micro_obs.infrastructure.configuration.service_settings import ServiceSettings, validate_port


class ItemServiceSettings(ServiceSettings):
    """Settings for the item (catalog) service."""

    service_name: str = "item"
    host: str = Field(default="0.0.0.0", alias="ITEM_HOST")
    port: int = Field(default=8080, alias="ITEM_PORT")
    endpoint: str = Field(default="127.0.0.1:8080", alias="ITEM_ENDPOINT")
    redis_url: str = Field(default="redis://127.0.0.1:6379/0", alias="ITEM_REDIS_URL")
    scan_count: int = Field(default=10, alias="ITEM_SCAN_COUNT", gt=0)

    @field_validator("port")
    @classmethod
    def check_port(cls, value: int) -> int:
        return validate_port(value)
