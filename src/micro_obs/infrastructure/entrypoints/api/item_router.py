
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from micro_obs.core.application.catalog import BatchOutcome, UpsertCatalogEntriesUseCase
from micro_obs.core.application.ports import CatalogStorePort
from micro_obs.core.domain.catalog import CatalogEntry
from micro_obs.core.domain.catalog.identifier_codec import IDENTIFIER_RE
from micro_obs.infrastructure.entrypoints.api.api_envelope import respond
from micro_obs.infrastructure.entrypoints.api.dtos.item_dto import ItemInDTO, ItemOutDTO
from micro_obs.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("api")
router = APIRouter()

_BATCH_STATUS = {
    BatchOutcome.ALL_CREATED: status.HTTP_201_CREATED,
    BatchOutcome.PARTIAL: status.HTTP_200_OK,
    BatchOutcome.ALL_FAILED: 422,
}


def get_catalog_store(request: Request) -> CatalogStorePort:
    return request.app.state.catalog_store


@router.get("/items", name="getAllItems")
async def get_all_items(store: CatalogStorePort = Depends(get_catalog_store)) -> JSONResponse:
    entries = []
    for key in await store.scan_all_keys():
        entry = await store.get(key)
        if entry is not None:
            entries.append(entry)

    if not entries:
        return respond(status.HTTP_404_NOT_FOUND, "no items present")
    return respond(
        status.HTTP_200_OK,
        "items retrieved",
        [ItemOutDTO.from_entry(entry).model_dump() for entry in entries],
    )


@router.post("/items", name="setItems")
async def create_items(
    payload: list[ItemInDTO], store: CatalogStorePort = Depends(get_catalog_store)
) -> JSONResponse:
    return await _write_items(payload, store, overwrite=False)


@router.put("/items", name="updateItems")
async def update_items(
    payload: list[ItemInDTO], store: CatalogStorePort = Depends(get_catalog_store)
) -> JSONResponse:
    return await _write_items(payload, store, overwrite=True)


@router.get("/items/{item_id}", name="getItem")
async def get_item(item_id: str, store: CatalogStorePort = Depends(get_catalog_store)) -> JSONResponse:
    entry = None
    if IDENTIFIER_RE.fullmatch(item_id):
        entry = await store.get(item_id)
    if entry is None:
        return respond(status.HTTP_404_NOT_FOUND, f"item with ID {item_id} doesn't exist")
    return respond(status.HTTP_200_OK, "item retrieved", [ItemOutDTO.from_entry(entry).model_dump()])


@router.delete("/items/{item_id}", name="delItem")
async def delete_item(item_id: str, store: CatalogStorePort = Depends(get_catalog_store)) -> JSONResponse:
    if not IDENTIFIER_RE.fullmatch(item_id):
        return respond(status.HTTP_404_NOT_FOUND, f"item with ID {item_id} doesn't exist")
    await store.delete(item_id)
    return respond(status.HTTP_200_OK, "item deleted")


async def _write_items(
    payload: list[ItemInDTO], store: CatalogStorePort, overwrite: bool
) -> JSONResponse:
    if not payload:
        return respond(422, "items can't be empty")

    entries = []
    for item in payload:
        if not item.name:
            return respond(422, "item needs name")
        entry = CatalogEntry.create(item.name, item.desc, item.qty)
        logger.debug("Catalog entry parsed", item_id=entry.id, item_name=entry.name, qty=entry.quantity)
        entries.append(entry)

    result = await UpsertCatalogEntriesUseCase(store).execute(entries, overwrite=overwrite)
    data = [ItemOutDTO.from_entry(entry).model_dump() for entry in result.created]
    return respond(_BATCH_STATUS[result.outcome], result.summary(), data or None)
