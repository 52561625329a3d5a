"""End-to-end order pipeline: real Redis adapters, real HTTP catalog client."""

import httpx
import pytest
import respx

from micro_obs.core.application.workflows.order.order_builder import OrderBuilder
from micro_obs.core.domain.order import OrderLine
from micro_obs.core.exceptions import NotFoundError
from micro_obs.infrastructure.clients.catalog import CatalogHttpClient
from micro_obs.infrastructure.configuration import ItemServiceSettings
from micro_obs.infrastructure.entrypoints.api.app_factory import create_item_service_app
from micro_obs.infrastructure.persistence.redis import (
    RedisCatalogStore,
    RedisOrderStore,
    RedisSequenceAllocator,
)

ITEM_SERVICE = "http://item.mock:8080"


@pytest.fixture()
def sequence(fake_redis) -> RedisSequenceAllocator:
    return RedisSequenceAllocator(fake_redis)


@pytest.fixture()
def builder(fake_redis, sequence) -> OrderBuilder:
    return OrderBuilder(
        sequence=sequence,
        catalog=CatalogHttpClient(ITEM_SERVICE),
        orders=RedisOrderStore(fake_redis),
    )


@pytest.mark.asyncio
@respx.mock
async def test_order_is_persisted_when_stock_suffices(builder, fake_redis):
    respx.get(f"{ITEM_SERVICE}/items/ab12cd").respond(
        200,
        json={
            "status": 200,
            "message": "item retrieved",
            "count": 1,
            "data": [{"id": "ab12cd", "name": "widget", "desc": "", "qty": 100}],
        },
    )

    order = await builder.build([OrderLine("ab12cd", 10)])

    assert order.id == 1
    assert await fake_redis.hgetall("order:1") == {"ab12cd": "10"}


@pytest.mark.asyncio
@respx.mock
async def test_unknown_item_burns_the_id_and_persists_nothing(builder, sequence, fake_redis):
    respx.get(f"{ITEM_SERVICE}/items/zz99").respond(
        404, json={"status": 404, "message": "item with ID zz99 doesn't exist", "count": 0, "data": None}
    )

    with pytest.raises(NotFoundError):
        await builder.build([OrderLine("zz99", 1)])

    assert await fake_redis.keys("order:*") == []
    assert await sequence.next() == 2


@pytest.mark.asyncio
async def test_order_service_verifies_against_item_service(fake_redis):
    item_app = create_item_service_app(ItemServiceSettings(), store=RedisCatalogStore(fake_redis))
    item_transport = httpx.ASGITransport(app=item_app)
    catalog = CatalogHttpClient(ITEM_SERVICE, http_client=httpx.AsyncClient(transport=item_transport))
    order_builder = OrderBuilder(
        sequence=RedisSequenceAllocator(fake_redis),
        catalog=catalog,
        orders=RedisOrderStore(fake_redis),
    )
    async with httpx.AsyncClient(transport=item_transport, base_url=ITEM_SERVICE) as item_client:
        created = await item_client.post("/items", json=[{"name": "Widget", "qty": 3}])
    item_id = created.json()["data"][0]["id"]

    order = await order_builder.build([OrderLine(item_id, 3)])

    assert await fake_redis.hgetall(f"order:{order.id}") == {item_id: "3"}
    await catalog.close()
