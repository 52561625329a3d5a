from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ApiEnvelope(BaseModel):
    """Body of every response: ``{status, message, count, data}``."""

    status: int
    message: str
    count: int = 0
    data: list[Any] | None = None


def respond(status_code: int, message: str, data: list[Any] | None = None) -> JSONResponse:
    envelope = ApiEnvelope(
        status=status_code,
        message=message,
        count=len(data) if data else 0,
        data=data,
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump())
