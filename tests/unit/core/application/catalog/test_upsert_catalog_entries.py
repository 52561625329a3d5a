from unittest.mock import AsyncMock

import pytest

from micro_obs.core.application.catalog import (
    BatchOutcome,
    EntryFailure,
    UpsertCatalogEntriesUseCase,
)
from micro_obs.core.domain.catalog import CatalogEntry
from micro_obs.core.exceptions import PersistenceError


@pytest.fixture()
def entries() -> list[CatalogEntry]:
    return [CatalogEntry.create("Widget", quantity=1), CatalogEntry.create("Gadget", quantity=2)]


@pytest.fixture()
def mock_store() -> AsyncMock:
    store = AsyncMock()
    store.get.return_value = None
    return store


@pytest.mark.asyncio
async def test_all_entries_created(mock_store, entries):
    result = await UpsertCatalogEntriesUseCase(mock_store).execute(entries, overwrite=False)

    assert result.outcome is BatchOutcome.ALL_CREATED
    assert result.created == entries
    assert mock_store.set.await_count == 2
    assert result.summary() == f"items {entries[0].id}, {entries[1].id} created"


@pytest.mark.asyncio
async def test_existing_entry_fails_without_overwrite(mock_store, entries):
    mock_store.get.side_effect = [entries[0], None]

    result = await UpsertCatalogEntriesUseCase(mock_store).execute(entries, overwrite=False)

    assert result.outcome is BatchOutcome.PARTIAL
    assert result.created == [entries[1]]
    assert result.failed == [EntryFailure(item_id=entries[0].id, reason="already exists")]
    mock_store.set.assert_awaited_once_with(entries[1])
    assert "created but some failed" in result.summary()


@pytest.mark.asyncio
async def test_existing_entry_is_overwritten_on_update(mock_store, entries):
    mock_store.get.side_effect = [entries[0], entries[1]]

    result = await UpsertCatalogEntriesUseCase(mock_store).execute(entries, overwrite=True)

    assert result.outcome is BatchOutcome.ALL_CREATED
    assert mock_store.set.await_count == 2


@pytest.mark.asyncio
async def test_write_failures_are_recorded_per_entry(mock_store, entries):
    mock_store.set.side_effect = PersistenceError("redis HSET failed")

    result = await UpsertCatalogEntriesUseCase(mock_store).execute(entries, overwrite=False)

    assert result.outcome is BatchOutcome.ALL_FAILED
    assert [failure.reason for failure in result.failed] == ["write failed", "write failed"]
    assert result.summary().startswith("unable to create items: ")


@pytest.mark.asyncio
async def test_read_failure_aborts_batch(mock_store, entries):
    mock_store.get.side_effect = PersistenceError("redis HGETALL failed")

    with pytest.raises(PersistenceError):
        await UpsertCatalogEntriesUseCase(mock_store).execute(entries, overwrite=False)

    mock_store.set.assert_not_awaited()
