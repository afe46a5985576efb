"""Readiness poller: bounded SELECT 1 loop with a fixed interval and timeout."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from loguru import logger

from dbprobe.app.constants import POLL_INTERVAL_SECONDS, POLL_TIMEOUT_SECONDS
from dbprobe.app.core import SERVICE_NAME
from dbprobe.app.domain.models import PollState, ProbeOutcome
from dbprobe.app.ports.database_connection import DatabaseHandle, DatabaseQueryError

Sleep = Callable[[float], Awaitable[None]]


class ReadinessPoller:
    """
    Issues the liveness query until it succeeds or the timeout is used up.

    Each failed attempt is followed by a sleep of interval_seconds, so with the
    defaults (5s / 300s) a database that never answers costs 60 queries and 60 sleeps
    before TIMED_OUT. A driver error from the query counts as "not ready" unless
    query_errors_fatal is set, in which case it ends the loop with QUERY_FAILED.
    """

    def __init__(
        self,
        *,
        interval_seconds: int = POLL_INTERVAL_SECONDS,
        timeout_seconds: int = POLL_TIMEOUT_SECONDS,
        query_errors_fatal: bool = False,
        sleep: Sleep = asyncio.sleep,
        log=None,
    ) -> None:
        self._initial_state = PollState(
            elapsed_seconds=0,
            timeout_seconds=timeout_seconds,
            interval_seconds=interval_seconds,
        )
        self._query_errors_fatal = query_errors_fatal
        self._sleep = sleep
        self._log = log or logger.bind(service_name=SERVICE_NAME)

    async def wait_until_ready(self, handle: DatabaseHandle) -> ProbeOutcome:
        state = self._initial_state
        while not state.expired:
            self._log.bind(event="db_check_attempt", elapsed_seconds=state.elapsed_seconds).info(
                "Checking database connection, attempt after {} seconds", state.elapsed_seconds
            )
            try:
                await handle.run_liveness_query()
            except DatabaseQueryError as exc:
                if self._query_errors_fatal:
                    self._log.bind(event="db_query_failed", error=str(exc)).error("Error checking database: {}", exc)
                    return ProbeOutcome.query_failed(str(exc))
                self._log.bind(event="db_not_ready", error=str(exc)).warning("Database query error: {}", exc)
            else:
                self._log.bind(event="db_ready", elapsed_seconds=state.elapsed_seconds).info("Database is ready!")
                return ProbeOutcome.ready()

            self._log.bind(event="db_waiting", interval_seconds=state.interval_seconds).info("")
            await self._sleep(state.interval_seconds)
            state = state.advance()

        self._log.bind(event="db_timed_out", elapsed_seconds=state.elapsed_seconds).error("")
        return ProbeOutcome.timed_out()
