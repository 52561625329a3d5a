"""Single choke point for Redis commands: metrics, debug logs and error mapping."""

from collections.abc import Awaitable
from typing import TypeVar

from redis.exceptions import RedisError

from micro_obs.core.exceptions import PersistenceError
from micro_obs.infrastructure.observability.logger_factory_service import get_logger
from micro_obs.infrastructure.observability.metrics_service import REDIS_COMMANDS_TOTAL

logger = get_logger("redis")

_T = TypeVar("_T")

REDIS_SPAN_ATTRIBUTES = {"db.system": "redis"}


async def run_command(command: str, awaitable: Awaitable[_T], key: str | None = None) -> _T:
    """Await a Redis command, turning engine failures into ``PersistenceError``."""
    logger.debug("redis sent", redis_command=command, redis_key=key)
    try:
        result = await awaitable
    except RedisError as exc:
        REDIS_COMMANDS_TOTAL.labels(command=command, outcome="error").inc()
        raise PersistenceError(
            f"redis {command} failed: {exc}",
            context={"command": command, "key": key},
        ) from exc
    REDIS_COMMANDS_TOTAL.labels(command=command, outcome="ok").inc()
    logger.debug("redis received", redis_command=command, redis_key=key)
    return result


async def scan_keys(client, match: str | None, count: int, key_type: str | None = None) -> list[str]:
    """Collect keys with an incremental SCAN cursor loop, optionally limited to one value type."""
    cursor = 0
    keys: list[str] = []
    while True:
        cursor, batch = await run_command(
            "SCAN", client.scan(cursor=cursor, match=match, count=count, _type=key_type)
        )
        keys.extend(batch)
        if cursor == 0:
            return keys
