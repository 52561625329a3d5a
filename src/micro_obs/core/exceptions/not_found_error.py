from micro_obs.core.exceptions.application_error import ApplicationError


class NotFoundError(ApplicationError):
    """Raised when a referenced catalog entry does not exist."""

    def __init__(self, message: str = "item doesn't exist", *, item_id: str | None = None) -> None:
        super().__init__(message, context={"item_id": item_id} if item_id is not None else None)
        self.item_id = item_id
