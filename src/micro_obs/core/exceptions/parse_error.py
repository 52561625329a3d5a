from micro_obs.core.exceptions.application_error import ApplicationError


class ParseError(ApplicationError):
    """Raised when a stored record does not have the expected shape."""
