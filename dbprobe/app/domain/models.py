"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dbprobe.app.constants import POLL_INTERVAL_SECONDS, POLL_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ConnectionParameters:
    """Target database coordinates decoded from the request payload."""

    host: str
    port: str
    user: str
    password: str
    database: str

    def redacted(self) -> dict[str, str]:
        """Loggable view; the password is masked."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": "****",
            "database": self.database,
        }


class OutcomeKind(str, Enum):
    READY = "READY"
    CONNECT_FAILED = "CONNECT_FAILED"
    QUERY_FAILED = "QUERY_FAILED"
    TIMED_OUT = "TIMED_OUT"


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of one probe invocation.

    detail carries the driver error text for CONNECT_FAILED and QUERY_FAILED and is None otherwise.
    """

    kind: OutcomeKind
    detail: str | None = None

    @classmethod
    def ready(cls) -> "ProbeOutcome":
        return cls(OutcomeKind.READY)

    @classmethod
    def connect_failed(cls, detail: str) -> "ProbeOutcome":
        return cls(OutcomeKind.CONNECT_FAILED, detail)

    @classmethod
    def query_failed(cls, detail: str) -> "ProbeOutcome":
        return cls(OutcomeKind.QUERY_FAILED, detail)

    @classmethod
    def timed_out(cls) -> "ProbeOutcome":
        return cls(OutcomeKind.TIMED_OUT)

    @property
    def is_ready(self) -> bool:
        return self.kind == OutcomeKind.READY


@dataclass(frozen=True)
class PollState:
    """Elapsed-time bookkeeping for the readiness loop."""

    elapsed_seconds: int = 0
    timeout_seconds: int = POLL_TIMEOUT_SECONDS
    interval_seconds: int = POLL_INTERVAL_SECONDS

    def __post_init__(self) -> None:
        if self.interval_seconds <= 0:
            raise ValueError("poll interval must be positive")
        if self.timeout_seconds < 0:
            raise ValueError("poll timeout must not be negative")
        if self.elapsed_seconds < 0:
            raise ValueError("elapsed seconds must not be negative")
        if self.elapsed_seconds % self.interval_seconds:
            raise ValueError("elapsed seconds must be a multiple of the poll interval")

    @property
    def expired(self) -> bool:
        return self.elapsed_seconds >= self.timeout_seconds

    def advance(self) -> "PollState":
        return PollState(
            elapsed_seconds=self.elapsed_seconds + self.interval_seconds,
            timeout_seconds=self.timeout_seconds,
            interval_seconds=self.interval_seconds,
        )


@dataclass(frozen=True)
class ProbeResponse:
    """Status code and message handed back to the hosting runtime."""

    status_code: int
    message: str
