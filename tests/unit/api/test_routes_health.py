"""Tests for GET /api/health with a stubbed database session."""

import pytest
from fastapi.testclient import TestClient

from floodhelp.adapters.persistence.database import get_session
from floodhelp.config import settings
from floodhelp.main import app


class _Result:
    def __init__(self, value):
        self._value = value

    def scalar(self):
        return self._value


class _HealthySession:
    def __init__(self, report_count=0):
        self._count = report_count

    async def execute(self, statement):
        return _Result(self._count)


class _BrokenSession:
    async def execute(self, statement):
        raise ConnectionRefusedError("connection refused")


def _client_with(session) -> TestClient:
    async def override():
        yield session

    app.dependency_overrides[get_session] = override
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_overrides():
    yield
    app.dependency_overrides.clear()


def test_health_reports_table_reachable():
    body = _client_with(_HealthySession(report_count=7)).get("/api/health").json()
    assert body["status"] == "ok"
    assert body["reports_table"] == "reachable"
    assert body["report_count"] == 7


def test_health_describes_geocoder():
    geocoder = _client_with(_HealthySession()).get("/api/health").json()["geocoder"]
    assert geocoder["url"] == settings.nominatim_url
    assert geocoder["country_codes"] == "th"
    assert geocoder["language"] == "th"


def test_health_degraded_when_database_down():
    body = _client_with(_BrokenSession()).get("/api/health").json()
    assert body["status"] == "degraded"
    assert body["reports_table"].startswith("error:")
    assert body["report_count"] is None
