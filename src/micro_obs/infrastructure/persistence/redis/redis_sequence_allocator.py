from redis.asyncio import Redis

from micro_obs.core.application.ports import SequencePort
from micro_obs.infrastructure.observability.tracing_setup import trace_operation
from micro_obs.infrastructure.persistence.redis.redis_command import (
    REDIS_SPAN_ATTRIBUTES,
    run_command,
)


class RedisSequenceAllocator(SequencePort):
    """Order ids from Redis ``INCR``, atomic across every client of the engine."""

    def __init__(self, client: Redis, key: str = "nextID") -> None:
        self._client = client
        self._key = key

    @trace_operation("redis.sequence.next", REDIS_SPAN_ATTRIBUTES)
    async def next(self) -> int:
        return int(await run_command("INCR", self._client.incr(self._key), key=self._key))
