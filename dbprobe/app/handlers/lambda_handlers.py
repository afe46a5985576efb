"""
Serverless entry points.

http_handler receives an API Gateway proxy event whose body is the JSON payload and
answers with a plain-text body. event_handler receives the payload object itself and
answers with {"statusCode", "message"}. Both run the same ProbeService in a fresh
event loop and a fresh set of dependencies per invocation. A DecodeError is raised
out of the handler so the runtime records an invocation error.
"""
from __future__ import annotations

import asyncio
import base64
import binascii
from typing import Any, Mapping

from dbprobe.app.composition import create_probe_dependencies
from dbprobe.app.config.settings import Settings
from dbprobe.app.core.logging import configure_logging
from dbprobe.app.domain.models import ProbeResponse
from dbprobe.app.domain.request_decoder import DecodeError
from dbprobe.app.handlers.response_encoder import to_http_event_response, to_structured_response

configure_logging(Settings())


def _event_body(event: Mapping[str, Any]) -> bytes:
    body = event.get("body")
    if body is None:
        raise DecodeError("request body is empty")
    if isinstance(body, str):
        if event.get("isBase64Encoded"):
            try:
                return base64.b64decode(body, validate=True)
            except binascii.Error as exc:
                raise DecodeError("request body is not valid base64") from exc
        return body.encode()
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    raise DecodeError(f"unsupported body type: {type(body).__name__}")


async def _run(payload: Any) -> ProbeResponse:
    dependencies = create_probe_dependencies()
    return await dependencies.service.handle(payload)


def http_handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    response = asyncio.run(_run(_event_body(event)))
    return to_http_event_response(response)


def event_handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    response = asyncio.run(_run(event))
    return to_structured_response(response)
