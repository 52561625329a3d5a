"""Conversion between :class:`Order` and its key-value storage form.

An order is stored as a hash whose fields are item ids and whose values are
quantities. Redis hands field maps back in arbitrary order and with string
values, so :func:`from_storage` sorts the fields and parses every value.
"""

import re
from collections.abc import Mapping

from micro_obs.core.domain.order.order import INT64_MAX, INT64_MIN, Order
from micro_obs.core.domain.order.order_line import OrderLine
from micro_obs.core.exceptions import ParseError

NAMESPACE_SEPARATOR = ":"

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def to_storage(order: Order) -> tuple[str, dict[str, int]]:
    """Return ``(key, fields)`` for ``order``.

    A later line with the same item id overwrites an earlier one in ``fields``.
    """
    fields: dict[str, int] = {}
    for line in sorted(order.lines, key=lambda line: line.item_id):
        fields[line.item_id] = line.quantity
    return str(order.id), fields


def from_storage(key: str, fields: Mapping[str, int | str]) -> Order:
    """Rebuild an order from its storage key and field map."""
    order_id = parse_order_id(key)

    lines = [
        OrderLine(item_id=item_id, quantity=_parse_int(fields[item_id], what=f"quantity of {item_id}"))
        for item_id in sorted(fields)
    ]
    return Order(id=order_id, lines=tuple(lines))


def parse_order_id(raw: str) -> int:
    """Parse a decimal signed 64-bit order id."""
    order_id = _parse_int(raw, what="order id")
    if not INT64_MIN <= order_id <= INT64_MAX:
        raise ParseError(f"order id {raw!r} is out of the signed 64-bit range", context={"key": raw})
    return order_id


def namespaced_key(namespace: str, order_id: int | str) -> str:
    return f"{namespace}{NAMESPACE_SEPARATOR}{order_id}"


def strip_namespace(key: str) -> str:
    """Drop everything up to and including the first separator."""
    _, separator, remainder = key.partition(NAMESPACE_SEPARATOR)
    if not separator:
        raise ParseError(f"key {key!r} has no namespace", context={"key": key})
    return remainder


def _parse_int(raw: int | str, what: str) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and _DECIMAL_RE.fullmatch(raw):
        return int(raw)
    raise ParseError(f"unable to parse {what}: {raw!r}", context={"value": repr(raw)})
