"""libpq keyword/value connection strings built from ConnectionParameters."""
from __future__ import annotations

from dataclasses import replace

from dbprobe.app.domain.models import ConnectionParameters

REDACTED = "****"


def build_connection_string(params: ConnectionParameters) -> str:
    """Values are inserted verbatim, without quoting or escaping."""
    return (
        f"host={params.host} port={params.port} user={params.user} "
        f"password={params.password} dbname={params.database}"
    )


def loggable_connection_string(params: ConnectionParameters) -> str:
    """Same layout as build_connection_string with the password replaced before formatting."""
    return build_connection_string(replace(params, password=REDACTED))


def scrub_password(text: str, password: str) -> str:
    """Mask the password and each of its whitespace-separated pieces in driver error text.

    An unescaped password containing spaces is split by libpq's parser, which then
    quotes fragments of it in its error messages.
    """
    if not password:
        return text
    secrets = {password, *password.split()}
    for secret in sorted(secrets, key=len, reverse=True):
        text = text.replace(secret, REDACTED)
    return text
