from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from micro_obs.infrastructure.entrypoints.api.api_envelope import respond

router = APIRouter()


@router.get("/", name="pong")
async def pong() -> JSONResponse:
    return respond(200, "pong")


@router.get("/healthz", name="healthz")
async def healthz() -> JSONResponse:
    return respond(200, "ok")


@router.get("/metrics", name="metrics")
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
