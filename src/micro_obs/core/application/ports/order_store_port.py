from abc import ABC, abstractmethod

from micro_obs.core.domain.order import Order


class OrderStorePort(ABC):
    @abstractmethod
    async def save(self, order: Order) -> None:
        """Persist the full field map of ``order``."""
        pass

    @abstractmethod
    async def get(self, order_id: int) -> Order | None:
        pass

    @abstractmethod
    async def scan_ids(self) -> list[int]:
        """Return the ids of every stored order."""
        pass
