from micro_obs.infrastructure.persistence.redis.redis_catalog_store import RedisCatalogStore
from micro_obs.infrastructure.persistence.redis.redis_client_factory import create_redis_client
from micro_obs.infrastructure.persistence.redis.redis_order_store import RedisOrderStore
from micro_obs.infrastructure.persistence.redis.redis_sequence_allocator import (
    RedisSequenceAllocator,
)

__all__ = [
    "RedisCatalogStore",
    "RedisOrderStore",
    "RedisSequenceAllocator",
    "create_redis_client",
]
