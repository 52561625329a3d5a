from micro_obs.infrastructure.observability.logging.request_context_middleware import (
    RequestContextMiddleware,
)
from micro_obs.infrastructure.observability.logging.service_schema_processor import (
    service_schema_processor,
)

__all__ = [
    "RequestContextMiddleware",
    "service_schema_processor",
]
