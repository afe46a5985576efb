from __future__ import annotations

import asyncio
from typing import Any

import pytest
from loguru import logger

from dbprobe.app.domain.models import ConnectionParameters
from dbprobe.app.ports.database_connection import DatabaseConnectError, DatabaseQueryError


class FakeHandle:
    """Implements DatabaseHandle for tests.

    query_results is consumed one entry per liveness query: None means success, an
    exception instance is raised. When exhausted, default_result is used.
    """

    def __init__(
        self,
        query_results: list[Exception | None] | None = None,
        *,
        default_result: Exception | None = None,
        drive_error: Exception | None = None,
    ) -> None:
        self._query_results = list(query_results or [])
        self._default_result = default_result
        self._drive_error = drive_error
        self._closed = asyncio.Event()
        self.queries = 0
        self.close_calls = 0
        self.drive_started = False

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    async def run_liveness_query(self) -> None:
        self.queries += 1
        result = self._query_results.pop(0) if self._query_results else self._default_result
        if result is not None:
            raise result

    async def drive(self) -> None:
        self.drive_started = True
        if self._drive_error is not None:
            raise self._drive_error
        await self._closed.wait()

    async def close(self) -> None:
        self.close_calls += 1
        self._closed.set()


class FakeConnector:
    """Implements DatabaseConnector for tests; records every connect call."""

    def __init__(self, handle: FakeHandle | None = None, *, error: str | None = None) -> None:
        self._handle = handle
        self._error = error
        self.connect_calls: list[ConnectionParameters] = []

    async def connect(self, params: ConnectionParameters) -> FakeHandle:
        self.connect_calls.append(params)
        if self._error is not None:
            raise DatabaseConnectError(self._error)
        if self._handle is None:
            self._handle = FakeHandle()
        return self._handle


class RecordingSleep:
    """Stands in for asyncio.sleep; records requested delays without waiting."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    @property
    def total(self) -> float:
        return sum(self.calls)

    async def __call__(self, delay: float) -> None:
        self.calls.append(delay)


def query_error(message: str = "the database system is starting up") -> DatabaseQueryError:
    return DatabaseQueryError(message)


VALID_PAYLOAD: dict[str, Any] = {
    "db_host": "db.internal",
    "db_port": "5432",
    "db_user": "probe",
    "db_password": "s3cret-pw",
    "db_name": "inventory",
}


@pytest.fixture()
def valid_payload() -> dict[str, Any]:
    return dict(VALID_PAYLOAD)


@pytest.fixture()
def connection_parameters() -> ConnectionParameters:
    return ConnectionParameters(
        host=VALID_PAYLOAD["db_host"],
        port=VALID_PAYLOAD["db_port"],
        user=VALID_PAYLOAD["db_user"],
        password=VALID_PAYLOAD["db_password"],
        database=VALID_PAYLOAD["db_name"],
    )


@pytest.fixture()
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def log_records() -> list[dict[str, Any]]:
    """Captures loguru records emitted during the test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def events(records: list[dict[str, Any]]) -> list[str]:
    return [r["extra"].get("event", "") for r in records]
