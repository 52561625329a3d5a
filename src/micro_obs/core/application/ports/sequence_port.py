from abc import ABC, abstractmethod


class SequencePort(ABC):
    @abstractmethod
    async def next(self) -> int:
        """Atomically increment the shared counter and return the new value (first call: 1)."""
        pass
