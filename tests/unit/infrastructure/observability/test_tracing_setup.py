import pytest

from micro_obs.infrastructure.observability.tracing_setup import trace_operation


@trace_operation("test.double", {"db.system": "redis"})
async def _double(value: int) -> int:
    return value * 2


@trace_operation("test.fail")
def _fail() -> None:
    raise ValueError("boom")


@pytest.mark.asyncio
async def test_async_function_keeps_its_result():
    assert await _double(21) == 42
    assert _double.__name__ == "_double"


def test_sync_function_exceptions_propagate():
    with pytest.raises(ValueError, match="boom"):
        _fail()
