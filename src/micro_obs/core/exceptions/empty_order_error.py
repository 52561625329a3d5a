from micro_obs.core.exceptions.application_error import ApplicationError


class EmptyOrderError(ApplicationError):
    """Raised when an order is requested without any lines."""

    def __init__(self, message: str = "order needs items") -> None:
        super().__init__(message)
