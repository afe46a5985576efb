from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from dbprobe.app.core import SERVICE_NAME
from dbprobe.app.domain.request_decoder import DecodeError

probe_router = APIRouter(tags=["Probe"])


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


@probe_router.post(
    "/probe",
    summary="Wait for a database to accept queries",
    description="Connects to the database described in the JSON body and polls SELECT 1 every 5 seconds for up to 5 minutes. The body is plain text.",
    responses={
        200: {"description": "Database is ready."},
        400: {"description": "Request body is not a valid probe request."},
        500: {"description": "Connection failed, query failed, or the database did not become available in time."},
        503: {"description": "Probe service not initialized."},
    },
)
async def probe(request: Request) -> Response:
    service_factory = getattr(request.app.state, "probe_service_factory", None)
    if service_factory is None:
        _log("probe_rejected", reason="service_not_initialized")
        return Response(status_code=503, content="Probe service not available")

    body = await request.body()
    try:
        result = await service_factory().handle(body)
    except DecodeError as exc:
        _log("probe_rejected", reason="decode_error", error=str(exc))
        return Response(status_code=400, content=str(exc), media_type="text/plain")

    return Response(status_code=result.status_code, content=result.message, media_type="text/plain")
