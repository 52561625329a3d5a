from micro_obs.core.exceptions.application_error import ApplicationError


class CodecError(ApplicationError):
    """Raised when an identifier cannot be encoded or decoded."""
