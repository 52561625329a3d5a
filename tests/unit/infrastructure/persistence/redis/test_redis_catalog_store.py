"""Unit tests: RedisCatalogStore against an in-memory Redis."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from micro_obs.core.domain.catalog import CatalogEntry
from micro_obs.core.exceptions import ParseError, PersistenceError
from micro_obs.infrastructure.persistence.redis import RedisCatalogStore


@pytest.fixture()
def store(fake_redis) -> RedisCatalogStore:
    return RedisCatalogStore(fake_redis, scan_count=10)


@pytest.mark.asyncio
async def test_set_writes_one_hash_per_entry(store, fake_redis, widget):
    await store.set(widget)

    assert await fake_redis.hgetall(widget.id) == {
        "name": "Widget",
        "desc": "A small widget",
        "qty": "100",
    }


@pytest.mark.asyncio
async def test_get_returns_stored_entry(store, widget):
    await store.set(widget)

    assert await store.get(widget.id) == widget


@pytest.mark.asyncio
async def test_get_missing_key_returns_none(store):
    assert await store.get("nothere") is None


@pytest.mark.asyncio
async def test_get_malformed_record_raises_parse_error(store, fake_redis, widget):
    await fake_redis.hset(widget.id, mapping={"name": "Widget", "qty": "lots"})

    with pytest.raises(ParseError):
        await store.get(widget.id)


@pytest.mark.asyncio
async def test_scan_all_keys_walks_every_cursor_page(fake_redis):
    store = RedisCatalogStore(fake_redis, scan_count=2)
    entries = [CatalogEntry.create(f"item {n}", quantity=n) for n in range(7)]
    for entry in entries:
        await store.set(entry)

    keys = await store.scan_all_keys()

    assert sorted(keys) == sorted(entry.id for entry in entries)


@pytest.mark.asyncio
async def test_scan_all_keys_skips_non_catalog_keys(store, fake_redis, widget):
    await store.set(widget)
    await fake_redis.incr("nextID")
    await fake_redis.hset("order:1", mapping={widget.id: "3"})

    assert await store.scan_all_keys() == [widget.id]


@pytest.mark.asyncio
async def test_delete_and_delete_many(store, widget):
    gadget = CatalogEntry.create("Gadget", quantity=1)
    gizmo = CatalogEntry.create("Gizmo", quantity=1)
    for entry in (widget, gadget, gizmo):
        await store.set(entry)

    await store.delete(widget.id)
    await store.delete(widget.id)
    await store.delete_many([gadget.id, gizmo.id])
    await store.delete_many([])

    assert await store.scan_all_keys() == []


@pytest.mark.asyncio
async def test_engine_failure_becomes_persistence_error(widget):
    client = AsyncMock()
    client.hgetall.side_effect = RedisConnectionError("connection refused")
    store = RedisCatalogStore(client)

    with pytest.raises(PersistenceError, match="HGETALL"):
        await store.get(widget.id)
