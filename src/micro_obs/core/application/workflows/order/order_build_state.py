from enum import StrEnum


class OrderBuildState(StrEnum):
    """Stages of a single order build. ``DONE`` and ``FAILED`` are terminal."""

    START = "start"
    ALLOCATING = "allocating"
    VERIFYING = "verifying"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"
