from dataclasses import dataclass

from micro_obs.core.domain.catalog import identifier_codec


def identifier_for(name: str) -> str:
    """Return the catalog identifier for ``name`` (case-insensitive)."""
    return identifier_codec.encode(name.lower())


@dataclass(frozen=True)
class CatalogEntry:
    """A stock-keeping record whose id is derived from its lower-cased name."""

    id: str
    name: str
    description: str
    quantity: int

    def __post_init__(self):
        if not self.name:
            raise ValueError("item needs name")
        if self.quantity < 0:
            raise ValueError(f"quantity can't be negative, is {self.quantity}")
        expected = identifier_for(self.name)
        if self.id != expected:
            raise ValueError(f"id {self.id!r} does not match name {self.name!r} (expected {expected!r})")

    @classmethod
    def create(cls, name: str, description: str = "", quantity: int = 0) -> "CatalogEntry":
        return cls(id=identifier_for(name), name=name, description=description, quantity=quantity)
