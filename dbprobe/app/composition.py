"""Composition root: single place where concrete implementations are wired.

Builds settings, connector, keeper, poller and the probe service. Serverless
handlers call create_probe_dependencies() once per invocation, so nothing is
carried between invocations. No DI container library; explicit wiring only.
"""
from __future__ import annotations

from dbprobe.app.config.settings import Settings
from dbprobe.app.infrastructure.persistence.factory import create_database_connector
from dbprobe.app.ports.database_connection import DatabaseConnector
from dbprobe.app.services.connection_keeper import ConnectionKeeper
from dbprobe.app.services.probe_database import ProbeService
from dbprobe.app.services.readiness_poller import ReadinessPoller


class ProbeDependencies:
    """Holds wired dependencies for one invocation."""

    def __init__(
        self,
        *,
        settings: Settings,
        connector: DatabaseConnector,
        keeper: ConnectionKeeper,
        poller: ReadinessPoller,
    ) -> None:
        self._settings = settings
        self._connector = connector
        self._keeper = keeper
        self._poller = poller
        self._service = ProbeService(connector, poller, keeper)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def connector(self) -> DatabaseConnector:
        return self._connector

    @property
    def keeper(self) -> ConnectionKeeper:
        return self._keeper

    @property
    def poller(self) -> ReadinessPoller:
        return self._poller

    @property
    def service(self) -> ProbeService:
        return self._service


def create_probe_dependencies(settings: Settings | None = None) -> ProbeDependencies:
    """
    Composition root: build all probe dependencies in one place.
    The connector backend is selected from settings (database_backend).
    """
    _settings = settings or Settings()
    connector = create_database_connector(_settings)
    poller = ReadinessPoller(query_errors_fatal=_settings.query_errors_fatal)

    return ProbeDependencies(
        settings=_settings,
        connector=connector,
        keeper=ConnectionKeeper(),
        poller=poller,
    )
