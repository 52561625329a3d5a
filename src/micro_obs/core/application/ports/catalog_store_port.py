from abc import ABC, abstractmethod
from collections.abc import Iterable

from micro_obs.core.domain.catalog import CatalogEntry


class CatalogStorePort(ABC):
    """Catalog entries keyed by their identifier in the key-value engine."""

    @abstractmethod
    async def scan_all_keys(self) -> list[str]:
        """Return every stored entry key using an incremental cursor scan. Order is engine-defined."""
        pass

    @abstractmethod
    async def get(self, item_id: str) -> CatalogEntry | None:
        """Return the entry or ``None`` when the key does not exist."""
        pass

    @abstractmethod
    async def set(self, entry: CatalogEntry) -> None:
        """Write every field of the entry in a single command."""
        pass

    @abstractmethod
    async def delete(self, item_id: str) -> None:
        """Delete one entry. Deleting a missing key is not an error."""
        pass

    @abstractmethod
    async def delete_many(self, item_ids: Iterable[str]) -> None:
        pass
