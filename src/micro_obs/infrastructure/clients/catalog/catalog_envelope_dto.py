from pydantic import BaseModel, Field


class CatalogItemDTO(BaseModel):
    id: str
    name: str = ""
    desc: str = ""
    qty: int = Field(ge=0)


class CatalogEnvelopeDTO(BaseModel):
    """Response envelope returned by every item service endpoint."""

    status: int
    message: str = ""
    count: int = 0
    data: list[CatalogItemDTO] | None = None
