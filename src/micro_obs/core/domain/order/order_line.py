from dataclasses import dataclass


@dataclass(frozen=True)
class OrderLine:
    """One requested catalog entry and its quantity."""

    item_id: str
    quantity: int
