from pydantic import Field, field_validator

from micro_obs.infrastructure.configuration.service_settings import ServiceSettings, validate_port


class OrderServiceSettings(ServiceSettings):
    """Settings for the order service and its view of the item service."""

    service_name: str = "order"
    host: str = Field(default="0.0.0.0", alias="ORDER_HOST")
    port: int = Field(default=9090, alias="ORDER_PORT")
    endpoint: str = Field(default="127.0.0.1:9090", alias="ORDER_ENDPOINT")
    redis_url: str = Field(default="redis://127.0.0.1:6379/1", alias="ORDER_REDIS_URL")
    scan_count: int = Field(default=10, alias="ORDER_SCAN_COUNT", gt=0)

    item_service_url: str = Field(default="http://127.0.0.1:8080", alias="ITEM_SERVICE_URL")
    catalog_timeout_seconds: float = Field(default=5.0, alias="CATALOG_TIMEOUT_SECONDS", gt=0)

    order_key_namespace: str = Field(default="order", alias="ORDER_KEY_NAMESPACE", min_length=1)
    next_id_key: str = Field(default="nextID", alias="ORDER_NEXT_ID_KEY", min_length=1)

    @field_validator("port")
    @classmethod
    def check_port(cls, value: int) -> int:
        return validate_port(value)

    @field_validator("item_service_url")
    @classmethod
    def add_scheme(cls, value: str) -> str:
        """Accept ``host:port`` as well as full URLs."""
        value = value.rstrip("/")
        if "://" not in value:
            return f"http://{value}"
        return value

    @field_validator("order_key_namespace")
    @classmethod
    def validate_namespace(cls, value: str) -> str:
        if ":" in value:
            raise ValueError("order key namespace can't contain ':'")
        return value
