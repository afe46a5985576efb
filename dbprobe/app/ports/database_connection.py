"""Database port: contract for opening a connection and running the liveness query.

The probe service and poller depend on this port; infrastructure (e.g. psycopg)
implements it and maps driver errors onto the exceptions below.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from dbprobe.app.domain.models import ConnectionParameters


class DatabaseError(Exception):
    """Base for database driver failures."""


class DatabaseConnectError(DatabaseError):
    """Raised when the initial connection cannot be established."""


class DatabaseQueryError(DatabaseError):
    """Raised when the liveness query fails at the driver level."""


class ConnectionLostError(DatabaseError):
    """Raised by the background driver when the connection goes away."""


@runtime_checkable
class DatabaseHandle(Protocol):
    """An open connection owned by a single invocation."""

    async def run_liveness_query(self) -> None:
        """Run the liveness query; raise DatabaseQueryError on driver failure."""
        ...

    async def drive(self) -> None:
        """Background I/O driver. Returns once the handle is closed, raises if the connection is lost."""
        ...

    async def close(self) -> None: ...


@runtime_checkable
class DatabaseConnector(Protocol):
    async def connect(self, params: ConnectionParameters) -> DatabaseHandle:
        """Single connection attempt; raise DatabaseConnectError on failure."""
        ...
