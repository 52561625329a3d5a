import pytest

from micro_obs.core.domain.order import Order, OrderLine
from micro_obs.core.domain.order.order import INT64_MAX, INT64_MIN


def test_lines_are_sorted_by_item_id() -> None:
    order = Order(id=7, lines=(OrderLine("zz", 1), OrderLine("aa", 2), OrderLine("mm", 3)))

    assert [line.item_id for line in order.lines] == ["aa", "mm", "zz"]


def test_sort_keeps_duplicates_in_submission_order() -> None:
    order = Order(id=1, lines=(OrderLine("b", 1), OrderLine("a", 5), OrderLine("b", 2)))

    assert order.lines == (OrderLine("a", 5), OrderLine("b", 1), OrderLine("b", 2))
    assert order.duplicate_item_ids() == ["b"]


def test_empty_order() -> None:
    assert Order(id=1).is_empty()
    assert not Order(id=1, lines=(OrderLine("a", 1),)).is_empty()


@pytest.mark.parametrize("order_id", [INT64_MIN, -1, 0, INT64_MAX])
def test_accepts_signed_64_bit_ids(order_id: int) -> None:
    assert Order(id=order_id).id == order_id


@pytest.mark.parametrize("order_id", [INT64_MIN - 1, INT64_MAX + 1])
def test_rejects_ids_outside_64_bit_range(order_id: int) -> None:
    with pytest.raises(ValueError, match="64-bit"):
        Order(id=order_id)
