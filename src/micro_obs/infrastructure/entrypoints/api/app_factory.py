from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI

from micro_obs.core.application.ports import (
    CatalogLookupPort,
    CatalogStorePort,
    OrderStorePort,
    SequencePort,
)
from micro_obs.core.application.workflows.order.order_builder import OrderBuilder
from micro_obs.infrastructure.clients.catalog import CatalogHttpClient
from micro_obs.infrastructure.configuration import ItemServiceSettings, OrderServiceSettings
from micro_obs.infrastructure.entrypoints.api.error_handlers import register_error_handlers
from micro_obs.infrastructure.entrypoints.api.health_router import router as health_router
from micro_obs.infrastructure.entrypoints.api.item_router import router as item_router
from micro_obs.infrastructure.entrypoints.api.order_router import router as order_router
from micro_obs.infrastructure.observability.logger_factory_service import get_logger
from micro_obs.infrastructure.observability.logging import RequestContextMiddleware
from micro_obs.infrastructure.observability.metrics_middleware import MetricsMiddleware
from micro_obs.infrastructure.persistence.redis import (
    RedisCatalogStore,
    RedisOrderStore,
    RedisSequenceAllocator,
    create_redis_client,
)

logger = get_logger("api")

Closer = Callable[[], Awaitable[None]]


def _lifespan(closers: list[Closer]):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        for close in closers:
            await close()
        logger.info("Service stopped", service=app.title)

    return lifespan


def _build_app(title: str, closers: list[Closer]) -> FastAPI:
    app = FastAPI(title=title, lifespan=_lifespan(closers))
    register_error_handlers(app)
    # Added last, so it runs first and the request id is bound for the metrics pass too.
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router)
    return app


def create_item_service_app(
    settings: ItemServiceSettings,
    store: CatalogStorePort | None = None,
) -> FastAPI:
    """Item service app. Without an injected ``store`` a Redis store is built from settings."""
    closers: list[Closer] = []
    if store is None:
        client = create_redis_client(settings.redis_url)
        closers.append(client.aclose)
        store = RedisCatalogStore(client, scan_count=settings.scan_count)

    app = _build_app("item", closers)
    app.state.catalog_store = store
    app.include_router(item_router)

    logger.info(
        "Item service configured",
        endpoint=settings.endpoint,
        app_env=settings.app_env,
        scan_count=settings.scan_count,
    )
    return app


def create_order_service_app(
    settings: OrderServiceSettings,
    sequence: SequencePort | None = None,
    catalog: CatalogLookupPort | None = None,
    orders: OrderStorePort | None = None,
) -> FastAPI:
    """Order service app. Dependencies that are not injected are built from settings."""
    closers: list[Closer] = []
    if sequence is None or orders is None:
        client = create_redis_client(settings.redis_url)
        closers.append(client.aclose)
        sequence = sequence or RedisSequenceAllocator(client, key=settings.next_id_key)
        orders = orders or RedisOrderStore(
            client, namespace=settings.order_key_namespace, scan_count=settings.scan_count
        )
    if catalog is None:
        http_catalog = CatalogHttpClient(
            settings.item_service_url, timeout_seconds=settings.catalog_timeout_seconds
        )
        closers.append(http_catalog.close)
        catalog = http_catalog

    app = _build_app("order", closers)
    app.state.order_store = orders
    app.state.order_builder = OrderBuilder(sequence=sequence, catalog=catalog, orders=orders)
    app.include_router(order_router)

    logger.info(
        "Order service configured",
        endpoint=settings.endpoint,
        app_env=settings.app_env,
        item_service_url=settings.item_service_url,
    )
    return app
