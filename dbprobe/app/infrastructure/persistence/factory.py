"""Database connector factory: selects implementation from config. Only place that imports concrete connectors."""
from __future__ import annotations

from dbprobe.app.config.settings import Settings
from dbprobe.app.infrastructure.persistence.postgres.postgres_connection import PostgresConnector
from dbprobe.app.ports.database_connection import DatabaseConnector


def create_database_connector(settings: Settings) -> DatabaseConnector:
    backend = settings.database_backend.strip().lower()

    if backend in ("postgres", "postgresql"):
        return PostgresConnector(
            connect_timeout_seconds=settings.database_connect_timeout_seconds,
            watch_interval_seconds=settings.keeper_watch_interval_seconds,
        )

    raise ValueError(f"Unsupported database backend: {backend}")
