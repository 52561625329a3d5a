from micro_obs.core.exceptions.application_error import ApplicationError


class PersistenceError(ApplicationError):
    """Raised when the key-value engine rejects or fails a command."""
