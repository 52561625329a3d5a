from pydantic import BaseModel, Field

from micro_obs.core.domain.catalog import CatalogEntry


class ItemInDTO(BaseModel):
    name: str = ""
    desc: str = ""
    qty: int = Field(default=0, ge=0)


class ItemOutDTO(BaseModel):
    id: str
    name: str
    desc: str
    qty: int

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "ItemOutDTO":
        return cls(id=entry.id, name=entry.name, desc=entry.description, qty=entry.quantity)
