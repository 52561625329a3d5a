"""Failures talking to the item service or decoding its responses."""

from micro_obs.core.exceptions.application_error import ApplicationError


class TransportError(ApplicationError):
    """The item service could not be reached, timed out or answered with an unexpected status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message, context={"status_code": status_code} if status_code else None)
        self.status_code = status_code

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.message}{code}"


class ProtocolError(ApplicationError):
    """The item service answered with a body that is not a response envelope."""
