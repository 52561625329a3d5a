from dataclasses import dataclass, field
from enum import StrEnum

from micro_obs.core.domain.catalog import CatalogEntry


class BatchOutcome(StrEnum):
    ALL_CREATED = "all_created"
    PARTIAL = "partial"
    ALL_FAILED = "all_failed"


@dataclass(frozen=True)
class EntryFailure:
    item_id: str
    reason: str


@dataclass
class CatalogBatchResult:
    """Per-entry results of a batch write, aggregated into one summary."""

    created: list[CatalogEntry] = field(default_factory=list)
    failed: list[EntryFailure] = field(default_factory=list)

    @property
    def outcome(self) -> BatchOutcome:
        if not self.failed:
            return BatchOutcome.ALL_CREATED
        if not self.created:
            return BatchOutcome.ALL_FAILED
        return BatchOutcome.PARTIAL

    def summary(self) -> str:
        created = ", ".join(entry.id for entry in self.created)
        failed = ", ".join(f"{failure.item_id} ({failure.reason})" for failure in self.failed)
        if self.outcome is BatchOutcome.ALL_CREATED:
            return f"items {created} created"
        if self.outcome is BatchOutcome.ALL_FAILED:
            return f"unable to create items: {failed}"
        return f"items {created} created but some failed: {failed}"
