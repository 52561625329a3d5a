import os

import uvicorn
from fastapi import FastAPI

from micro_obs.infrastructure.configuration import ItemServiceSettings, OrderServiceSettings
from micro_obs.infrastructure.configuration.service_settings import ServiceSettings
from micro_obs.infrastructure.entrypoints.api.app_factory import (
    create_item_service_app,
    create_order_service_app,
)
from micro_obs.infrastructure.observability.logger_factory_service import configure_logging
from micro_obs.infrastructure.observability.tracing_setup import configure_tracing


def _bootstrap(settings: ServiceSettings) -> None:
    # The log schema processor reads the service name from the environment.
    os.environ.setdefault("SERVICE_NAME", settings.service_name)
    configure_logging(settings.log_level, app_env=settings.app_env, log_format=settings.log_format)
    configure_tracing(
        settings.service_name, app_env=settings.app_env, console_export=settings.otel_console_export
    )


def create_item_app() -> FastAPI:
    """Uvicorn factory for the item service, configured from the environment."""
    settings = ItemServiceSettings()
    _bootstrap(settings)
    return create_item_service_app(settings)


def create_order_app() -> FastAPI:
    """Uvicorn factory for the order service, configured from the environment."""
    settings = OrderServiceSettings()
    _bootstrap(settings)
    return create_order_service_app(settings)


def run_item() -> None:
    settings = ItemServiceSettings()
    uvicorn.run(
        "micro_obs.main:create_item_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


def run_order() -> None:
    settings = OrderServiceSettings()
    uvicorn.run(
        "micro_obs.main:create_order_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
