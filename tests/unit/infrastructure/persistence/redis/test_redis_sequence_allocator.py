import asyncio

import pytest

from micro_obs.infrastructure.persistence.redis import RedisSequenceAllocator


@pytest.mark.asyncio
async def test_first_id_is_one(fake_redis):
    allocator = RedisSequenceAllocator(fake_redis)

    assert await allocator.next() == 1
    assert await allocator.next() == 2
    assert await fake_redis.get("nextID") == "2"


@pytest.mark.asyncio
async def test_continues_from_existing_counter(fake_redis):
    await fake_redis.set("orders:seq", 41)

    assert await RedisSequenceAllocator(fake_redis, key="orders:seq").next() == 42


@pytest.mark.asyncio
async def test_concurrent_allocations_are_unique_and_gapless(fake_redis):
    allocators = [RedisSequenceAllocator(fake_redis) for _ in range(5)]

    ids = await asyncio.gather(*(allocators[n % 5].next() for n in range(50)))

    assert sorted(ids) == list(range(1, 51))
