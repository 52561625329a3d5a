from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntrySnapshot:
    """The stock of a catalog entry as reported by the item service at fetch time."""

    item_id: str
    quantity: int


class CatalogLookupPort(ABC):
    """Read access to catalog entries owned by another service."""

    @abstractmethod
    async def fetch(self, item_id: str) -> CatalogEntrySnapshot:
        """Fetch the current entry.

        Raises NotFoundError, TransportError or ProtocolError.
        """
        pass
