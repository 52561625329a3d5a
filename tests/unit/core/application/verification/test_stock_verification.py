import pytest

from micro_obs.core.application.ports import CatalogEntrySnapshot
from micro_obs.core.application.verification import verify_stock
from micro_obs.core.exceptions import InsufficientStockError, NotFoundError


def test_enough_stock_passes() -> None:
    verify_stock(CatalogEntrySnapshot(item_id="ab12cd", quantity=100), 10)


def test_exact_stock_passes() -> None:
    verify_stock(CatalogEntrySnapshot(item_id="ab12cd", quantity=10), 10)


def test_missing_entry_is_not_found() -> None:
    with pytest.raises(NotFoundError):
        verify_stock(None, 1)


def test_insufficient_stock_reports_quantities() -> None:
    with pytest.raises(InsufficientStockError) as exc_info:
        verify_stock(CatalogEntrySnapshot(item_id="ab12cd", quantity=3), 5)

    exc = exc_info.value
    assert exc.want_qty == 5
    assert exc.available == 3
    assert exc.context["item_id"] == "ab12cd"
    assert str(exc) == "not enough items, want 5, in stock: 3"


@pytest.mark.parametrize("quantity", [0, 7])
def test_zero_quantity_request_always_passes(quantity: int) -> None:
    verify_stock(CatalogEntrySnapshot(item_id="ab12cd", quantity=quantity), 0)
