"""
Probe service: decode -> connect -> spawn keeper -> poll -> encode.

Accepts the raw payload and returns a ProbeResponse; adapters translate that into
their event envelope. DecodeError is not caught here so each adapter can surface
it the way its runtime expects.
"""
from __future__ import annotations

from typing import Any, Mapping

from loguru import logger

from dbprobe.app.core import SERVICE_NAME
from dbprobe.app.domain.models import ConnectionParameters, ProbeOutcome, ProbeResponse
from dbprobe.app.domain.request_decoder import decode_request
from dbprobe.app.handlers.response_encoder import encode_outcome
from dbprobe.app.ports.database_connection import DatabaseConnectError, DatabaseConnector
from dbprobe.app.services.connection_keeper import ConnectionKeeper
from dbprobe.app.services.readiness_poller import ReadinessPoller


class ProbeService:
    def __init__(
        self,
        connector: DatabaseConnector,
        poller: ReadinessPoller,
        keeper: ConnectionKeeper,
        *,
        log=None,
    ) -> None:
        self._connector = connector
        self._poller = poller
        self._keeper = keeper
        self._log = log or logger.bind(service_name=SERVICE_NAME)

    async def probe(self, params: ConnectionParameters) -> ProbeOutcome:
        try:
            handle = await self._connector.connect(params)
        except DatabaseConnectError as exc:
            self._log.bind(event="db_connect_failed", host=params.host, port=params.port, error=str(exc)).error(
                "Error connecting to database: {}", exc
            )
            return ProbeOutcome.connect_failed(str(exc))

        self._keeper.spawn(handle)
        try:
            return await self._poller.wait_until_ready(handle)
        finally:
            await handle.close()

    async def handle(self, payload: bytes | str | Mapping[str, Any]) -> ProbeResponse:
        params = decode_request(payload)
        self._log.bind(event="request_decoded", **params.redacted()).info("")

        outcome = await self.probe(params)
        response = encode_outcome(outcome)
        self._log.bind(
            event="probe_finished",
            outcome=outcome.kind.value,
            status_code=response.status_code,
        ).info(response.message)
        return response
