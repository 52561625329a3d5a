import fakeredis
import pytest
from fakeredis.aioredis import FakeRedis

from micro_obs.core.domain.catalog import CatalogEntry


@pytest.fixture()
def fake_redis() -> FakeRedis:
    """A fresh in-memory Redis per test; nothing is shared between tests."""
    return FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture()
def widget() -> CatalogEntry:
    return CatalogEntry.create("Widget", "A small widget", 100)
