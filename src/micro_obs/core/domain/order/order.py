from collections.abc import Iterable
from dataclasses import dataclass, field

from micro_obs.core.domain.order.order_line import OrderLine

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def sort_lines(lines: Iterable[OrderLine]) -> tuple[OrderLine, ...]:
    """Sort lines ascending by item id. The sort is stable, duplicates keep their relative order."""
    return tuple(sorted(lines, key=lambda line: line.item_id))


@dataclass(frozen=True)
class Order:
    """An order bound to a sequence-allocated id.

    ``lines`` is always held sorted by item id so the in-memory value and its
    storage form compare equal after a round-trip.
    """

    id: int
    lines: tuple[OrderLine, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not INT64_MIN <= self.id <= INT64_MAX:
            raise ValueError(f"order id {self.id} is out of the signed 64-bit range")
        object.__setattr__(self, "lines", sort_lines(self.lines))

    def is_empty(self) -> bool:
        return len(self.lines) == 0

    def duplicate_item_ids(self) -> list[str]:
        seen: set[str] = set()
        duplicates: list[str] = []
        for line in self.lines:
            if line.item_id in seen and line.item_id not in duplicates:
                duplicates.append(line.item_id)
            seen.add(line.item_id)
        return duplicates
