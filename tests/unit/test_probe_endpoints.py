from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dbprobe.app.routers.health import health_router
from dbprobe.app.routers.probe import probe_router
from dbprobe.app.services.connection_keeper import ConnectionKeeper
from dbprobe.app.services.probe_database import ProbeService
from dbprobe.app.services.readiness_poller import ReadinessPoller
from tests.conftest import FakeConnector, FakeHandle, RecordingSleep, query_error


def _factory(connector: FakeConnector):
    return lambda: ProbeService(connector, ReadinessPoller(sleep=RecordingSleep()), ConnectionKeeper())


@pytest.fixture()
def test_app() -> FastAPI:
    app = FastAPI()
    app.state.probe_service_factory = _factory(FakeConnector(FakeHandle()))
    app.include_router(health_router)
    app.include_router(probe_router)
    return app


def test_live_is_always_200(test_app):
    client = TestClient(test_app)
    r = client.get("/health/live")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_probe_200_when_ready(test_app, valid_payload):
    client = TestClient(test_app)
    r = client.post("/probe", json=valid_payload)
    assert r.status_code == 200
    assert r.text == "Database is ready!"
    assert r.headers["content-type"].startswith("text/plain")


def test_probe_500_when_connect_fails(test_app, valid_payload):
    test_app.state.probe_service_factory = _factory(FakeConnector(error="connection refused"))
    client = TestClient(test_app)
    r = client.post("/probe", json=valid_payload)
    assert r.status_code == 500
    assert r.text == "Error connecting to database: connection refused"


def test_probe_500_when_never_ready(test_app, valid_payload):
    test_app.state.probe_service_factory = _factory(FakeConnector(FakeHandle(default_result=query_error())))
    client = TestClient(test_app)
    r = client.post("/probe", json=valid_payload)
    assert r.status_code == 500
    assert r.text == "Database did not become available within 5 minutes."


def test_probe_400_on_invalid_body(test_app, valid_payload):
    del valid_payload["db_host"]
    client = TestClient(test_app)
    r = client.post("/probe", json=valid_payload)
    assert r.status_code == 400
    assert "db_host" in r.text


def test_probe_503_when_not_initialized(valid_payload):
    app = FastAPI()
    app.include_router(probe_router)
    client = TestClient(app)
    r = client.post("/probe", json=valid_payload)
    assert r.status_code == 503
