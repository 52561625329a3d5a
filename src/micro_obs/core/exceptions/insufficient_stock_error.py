from micro_obs.core.exceptions.application_error import ApplicationError


class InsufficientStockError(ApplicationError):
    """Raised when the requested quantity exceeds the available stock."""

    def __init__(self, want_qty: int, available: int, *, item_id: str | None = None) -> None:
        super().__init__(
            f"not enough items, want {want_qty}, in stock: {available}",
            context={"want_qty": want_qty, "available": available},
        )
        self.want_qty = want_qty
        self.available = available
        self.item_id = item_id
        if item_id is not None:
            self.context["item_id"] = item_id
