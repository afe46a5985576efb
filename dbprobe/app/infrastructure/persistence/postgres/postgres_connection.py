"""PostgreSQL implementation of the database port using psycopg (async)."""
from __future__ import annotations

import asyncio
from typing import Any

import psycopg
from loguru import logger

from dbprobe.app.constants import LIVENESS_QUERY
from dbprobe.app.core import SERVICE_NAME
from dbprobe.app.domain.connection_string import (
    build_connection_string,
    loggable_connection_string,
    scrub_password,
)
from dbprobe.app.domain.models import ConnectionParameters
from dbprobe.app.ports.database_connection import (
    ConnectionLostError,
    DatabaseConnectError,
    DatabaseConnector,
    DatabaseHandle,
    DatabaseQueryError,
)


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class PostgresHandle(DatabaseHandle):
    """Wraps one psycopg.AsyncConnection for the lifetime of an invocation."""

    def __init__(self, connection: psycopg.AsyncConnection, *, watch_interval_seconds: float = 1.0) -> None:
        self._connection = connection
        self._watch_interval_seconds = watch_interval_seconds
        self._closed = asyncio.Event()

    async def run_liveness_query(self) -> None:
        try:
            async with self._connection.cursor() as cursor:
                await cursor.execute(LIVENESS_QUERY)
                await cursor.fetchall()
        except psycopg.Error as exc:
            raise DatabaseQueryError(str(exc)) from exc

    async def drive(self) -> None:
        while not self._closed.is_set():
            if self._connection.broken:
                raise ConnectionLostError("connection to server was lost")
            try:
                await asyncio.wait_for(self._closed.wait(), timeout=self._watch_interval_seconds)
            except asyncio.TimeoutError:
                continue

    async def close(self) -> None:
        self._closed.set()
        if not self._connection.closed:
            await self._connection.close()


class PostgresConnector(DatabaseConnector):
    """Opens a plaintext (sslmode=disable) connection; one attempt, no retry."""

    def __init__(self, *, connect_timeout_seconds: int = 10, watch_interval_seconds: float = 1.0) -> None:
        self._connect_timeout_seconds = connect_timeout_seconds
        self._watch_interval_seconds = watch_interval_seconds

    async def connect(self, params: ConnectionParameters) -> PostgresHandle:
        conninfo = build_connection_string(params)
        _log("db_connecting", conninfo=loggable_connection_string(params))
        try:
            connection = await psycopg.AsyncConnection.connect(
                conninfo,
                sslmode="disable",
                autocommit=True,
                connect_timeout=self._connect_timeout_seconds,
            )
        except psycopg.Error as exc:
            raise DatabaseConnectError(scrub_password(str(exc), params.password)) from exc
        _log("db_connected", host=params.host, port=params.port, database=params.database)
        return PostgresHandle(connection, watch_interval_seconds=self._watch_interval_seconds)
