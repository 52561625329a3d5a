from redis.asyncio import Redis

from micro_obs.core.application.ports import OrderStorePort
from micro_obs.core.domain.order import Order
from micro_obs.core.domain.order.order_marshalling import (
    from_storage,
    namespaced_key,
    parse_order_id,
    strip_namespace,
    to_storage,
)
from micro_obs.core.exceptions import PersistenceError
from micro_obs.infrastructure.observability.tracing_setup import trace_operation
from micro_obs.infrastructure.persistence.redis.redis_command import (
    REDIS_SPAN_ATTRIBUTES,
    run_command,
    scan_keys,
)


class RedisOrderStore(OrderStorePort):
    """Orders stored as hashes ``<namespace>:<id>`` mapping item ids to quantities."""

    def __init__(self, client: Redis, namespace: str = "order", scan_count: int = 10) -> None:
        self._client = client
        self._namespace = namespace
        self._scan_count = scan_count

    @trace_operation("redis.order.save", REDIS_SPAN_ATTRIBUTES)
    async def save(self, order: Order) -> None:
        if order.is_empty():
            raise PersistenceError("order needs items", context={"order_id": order.id})
        order_id, fields = to_storage(order)
        key = namespaced_key(self._namespace, order_id)
        await run_command("HSET", self._client.hset(key, mapping=fields), key=key)

    @trace_operation("redis.order.get", REDIS_SPAN_ATTRIBUTES)
    async def get(self, order_id: int) -> Order | None:
        key = namespaced_key(self._namespace, order_id)
        fields = await run_command("HGETALL", self._client.hgetall(key), key=key)
        if not fields:
            return None
        return from_storage(strip_namespace(key), fields)

    @trace_operation("redis.order.scan", REDIS_SPAN_ATTRIBUTES)
    async def scan_ids(self) -> list[int]:
        keys = await scan_keys(self._client, match=f"{self._namespace}:*", count=self._scan_count)
        return [parse_order_id(strip_namespace(key)) for key in keys]
