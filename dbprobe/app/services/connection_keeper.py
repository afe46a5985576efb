"""Runs a handle's background driver as a detached task whose failures are only logged."""
from __future__ import annotations

import asyncio

from loguru import logger

from dbprobe.app.core import SERVICE_NAME
from dbprobe.app.ports.database_connection import DatabaseHandle


class ConnectionKeeper:
    """
    Spawns DatabaseHandle.drive() alongside the poller.

    The spawned task is never awaited by the caller. Any exception it raises is logged
    at ERROR and dropped, so it cannot affect the probe outcome. Running tasks are
    referenced from _tasks until done so the event loop does not garbage-collect them.
    """

    def __init__(self, *, log=None) -> None:
        self._log = log or logger.bind(service_name=SERVICE_NAME)
        self._tasks: set[asyncio.Task] = set()

    @property
    def active_tasks(self) -> frozenset[asyncio.Task]:
        return frozenset(self._tasks)

    def spawn(self, handle: DatabaseHandle) -> asyncio.Task:
        task = asyncio.create_task(self._run(handle), name="dbprobe-connection-keeper")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._log.bind(event="keeper_started").info("")
        return task

    async def _run(self, handle: DatabaseHandle) -> None:
        try:
            await handle.drive()
        except Exception as exc:
            self._log.bind(event="keeper_failed", error=str(exc)).error("Connection error: {}", exc)
            return
        self._log.bind(event="keeper_stopped").info("")
