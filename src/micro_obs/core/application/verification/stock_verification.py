from micro_obs.core.application.ports import CatalogEntrySnapshot
from micro_obs.core.exceptions import InsufficientStockError, NotFoundError


def verify_stock(entry: CatalogEntrySnapshot | None, want_qty: int) -> None:
    """Check that ``entry`` exists and holds at least ``want_qty`` units."""
    if entry is None:
        raise NotFoundError("item doesn't exist")
    if entry.quantity < want_qty:
        raise InsufficientStockError(want_qty, entry.quantity, item_id=entry.item_id)
