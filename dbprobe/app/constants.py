"""Probe-level constants shared across modules."""
from __future__ import annotations

POLL_INTERVAL_SECONDS = 5
POLL_TIMEOUT_SECONDS = 300  # 5 minutes

LIVENESS_QUERY = "SELECT 1"


class ProbeMessage:
    READY = "Database is ready!"
    CONNECT_FAILED = "Error connecting to database: {detail}"
    QUERY_FAILED = "Error checking database: {detail}"
    TIMED_OUT = "Database did not become available within 5 minutes."
