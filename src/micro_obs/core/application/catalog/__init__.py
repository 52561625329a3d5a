from micro_obs.core.application.catalog.catalog_batch_result import (
    BatchOutcome,
    CatalogBatchResult,
    EntryFailure,
)
from micro_obs.core.application.catalog.upsert_catalog_entries import UpsertCatalogEntriesUseCase

__all__ = ["BatchOutcome", "CatalogBatchResult", "EntryFailure", "UpsertCatalogEntriesUseCase"]
