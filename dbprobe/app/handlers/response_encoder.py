"""Maps a ProbeOutcome to a status/message pair and renders it for each event shape."""
from __future__ import annotations

from typing import Any

from dbprobe.app.constants import ProbeMessage
from dbprobe.app.domain.models import OutcomeKind, ProbeOutcome, ProbeResponse


def encode_outcome(outcome: ProbeOutcome) -> ProbeResponse:
    if outcome.kind == OutcomeKind.READY:
        return ProbeResponse(status_code=200, message=ProbeMessage.READY)
    if outcome.kind == OutcomeKind.CONNECT_FAILED:
        return ProbeResponse(status_code=500, message=ProbeMessage.CONNECT_FAILED.format(detail=outcome.detail))
    if outcome.kind == OutcomeKind.QUERY_FAILED:
        return ProbeResponse(status_code=500, message=ProbeMessage.QUERY_FAILED.format(detail=outcome.detail))
    if outcome.kind == OutcomeKind.TIMED_OUT:
        return ProbeResponse(status_code=500, message=ProbeMessage.TIMED_OUT)
    raise ValueError(f"Unknown probe outcome: {outcome.kind}")


def to_http_event_response(response: ProbeResponse) -> dict[str, Any]:
    """API Gateway proxy shape: plain-text body."""
    return {
        "statusCode": response.status_code,
        "headers": {"Content-Type": "text/plain; charset=utf-8"},
        "isBase64Encoded": False,
        "body": response.message,
    }


def to_structured_response(response: ProbeResponse) -> dict[str, Any]:
    return {"statusCode": response.status_code, "message": response.message}
