"""Batch creation/update of catalog entries.

Unlike the order pipeline, a batch write does not stop at the first failing
entry: every entry gets its own ``created`` or ``failed(reason)`` result.
"""

from collections.abc import Sequence

from micro_obs.core.application.catalog.catalog_batch_result import CatalogBatchResult, EntryFailure
from micro_obs.core.application.ports import CatalogStorePort
from micro_obs.core.domain.catalog import CatalogEntry
from micro_obs.core.exceptions import PersistenceError
from micro_obs.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("catalog")


class UpsertCatalogEntriesUseCase:
    def __init__(self, store: CatalogStorePort) -> None:
        self._store = store

    async def execute(self, entries: Sequence[CatalogEntry], overwrite: bool) -> CatalogBatchResult:
        """Write ``entries``; existing ones are skipped as failures unless ``overwrite`` is set.

        Read failures abort the whole batch with ``PersistenceError``; write
        failures are recorded per entry.
        """
        result = CatalogBatchResult()
        for entry in entries:
            existing = await self._store.get(entry.id)
            if existing is not None and not overwrite:
                logger.debug("Catalog entry already exists", item_id=entry.id)
                result.failed.append(EntryFailure(item_id=entry.id, reason="already exists"))
                continue
            try:
                await self._store.set(entry)
            except PersistenceError as exc:
                logger.error("Unable to write catalog entry", item_id=entry.id, error_details=str(exc))
                result.failed.append(EntryFailure(item_id=entry.id, reason="write failed"))
                continue
            result.created.append(entry)

        logger.info(
            "Catalog batch written",
            created_count=len(result.created),
            failed_count=len(result.failed),
            overwrite=overwrite,
        )
        return result
