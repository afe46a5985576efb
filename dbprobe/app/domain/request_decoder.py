"""Request decoder: turns the inbound event payload into ConnectionParameters.

Accepts raw bytes/str (HTTP body) or an already-parsed mapping (structured event).
All five fields are required strings; nothing is defaulted or coerced.
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError

from dbprobe.app.domain.models import ConnectionParameters


class DecodeError(ValueError):
    """Raised when the payload cannot be decoded into connection parameters."""


class ProbeRequest(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    db_host: str
    db_port: str
    db_user: str
    db_password: str
    db_name: str

    def to_parameters(self) -> ConnectionParameters:
        return ConnectionParameters(
            host=self.db_host,
            port=self.db_port,
            user=self.db_user,
            password=self.db_password,
            database=self.db_name,
        )


def decode_request(payload: bytes | str | Mapping[str, Any]) -> ConnectionParameters:
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            request = ProbeRequest.model_validate_json(payload)
        elif isinstance(payload, Mapping):
            request = ProbeRequest.model_validate(dict(payload))
        else:
            raise DecodeError(f"unsupported payload type: {type(payload).__name__}")
    except ValidationError as exc:
        raise DecodeError(f"invalid probe request: {_describe(exc)}") from exc
    return request.to_parameters()


def _describe(exc: ValidationError) -> str:
    # Input values are left out so the password never ends up in an error message.
    problems = []
    for error in exc.errors(include_input=False, include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "payload"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)
