from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from micro_obs.core.exceptions import (
    ApplicationError,
    CodecError,
    EmptyOrderError,
    InsufficientStockError,
    NotFoundError,
    ParseError,
    PersistenceError,
    ProtocolError,
    TransportError,
)
from micro_obs.infrastructure.entrypoints.api.api_envelope import respond
from micro_obs.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("api")

ERROR_STATUS_CODES: dict[type[ApplicationError], int] = {
    EmptyOrderError: 422,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InsufficientStockError: 422,
    TransportError: status.HTTP_502_BAD_GATEWAY,
    ProtocolError: status.HTTP_502_BAD_GATEWAY,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ParseError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    CodecError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: ApplicationError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
        status_code = status_code_for(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "Request failed",
            processing_status="ERROR",
            http_status=status_code,
            error_type=type(exc).__name__,
            error_details=str(exc),
            **exc.context,
        )
        return respond(status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        logger.info(f"Validation error for request {request.url}: {errors}")
        if any(error.get("type") == "json_invalid" for error in errors):
            return respond(status.HTTP_400_BAD_REQUEST, "unable to parse payload")
        return respond(422, "invalid payload")
