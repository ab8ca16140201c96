"""Clock route tests - snapshot and conversion endpoints over a pinned normalizer.

Tests cover:
    - GET /api/v1/clock/ reports utc_now, event_now, event_today and zone
    - GET /api/v1/clock/convert for offset, Z and naive ISO input
    - Unparseable instant -> 400 INVALID_INSTANT domain error
    - Instants at either end of the datetime range clamp instead of failing
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from eventclock.clock import ReferenceTimezoneCache, TimeNormalizer, default_normalizer
from eventclock.core.resolve_timezone import IANA_REFERENCE_KEY
from eventclock.main import app
from tests.helpers import SAST, FakeZoneFinder, fixed_clock

PINNED = datetime(2025, 3, 14, 22, 30, tzinfo=timezone.utc)


@pytest.fixture
def client():
    normalizer = TimeNormalizer(
        clock=fixed_clock(PINNED),
        cache=ReferenceTimezoneCache(FakeZoneFinder({IANA_REFERENCE_KEY: SAST})),
    )
    app.dependency_overrides[default_normalizer] = lambda: normalizer
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_clock_snapshot(client):
    resp = client.get("/api/v1/clock/")
    assert resp.status_code == 200
    body = resp.json()
    assert datetime.fromisoformat(body["utc_now"].replace("Z", "+00:00")) == PINNED
    assert body["event_now"] == "2025-03-15T00:30:00"
    assert body["event_today"] == "2025-03-15"
    assert body["timezone"] == {
        "key": IANA_REFERENCE_KEY, "namespace": "iana", "is_fallback": False,
    }


def test_convert_utc_instant(client):
    resp = client.get("/api/v1/clock/convert", params={"instant": "2025-03-14T10:00:00Z"})
    assert resp.status_code == 200
    assert resp.json()["event_local"] == "2025-03-14T12:00:00"


def test_convert_offset_instant(client):
    resp = client.get(
        "/api/v1/clock/convert", params={"instant": "2025-03-14T12:00:00+05:00"},
    )
    assert resp.status_code == 200
    assert resp.json()["event_local"] == "2025-03-14T09:00:00"


def test_convert_naive_instant_treated_as_utc(client):
    resp = client.get("/api/v1/clock/convert", params={"instant": "2025-03-14T22:30:00"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["event_local"] == "2025-03-15T00:30:00"
    instant = datetime.fromisoformat(body["instant"].replace("Z", "+00:00"))
    assert instant == datetime(2025, 3, 14, 22, 30, tzinfo=timezone.utc)


def test_convert_rejects_garbage(client):
    resp = client.get("/api/v1/clock/convert", params={"instant": "next tuesday"})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "INVALID_INSTANT"
    assert error["category"] == "validation"
    assert "next tuesday" in error["message"]


def test_convert_clamps_at_end_of_range(client):
    resp = client.get("/api/v1/clock/convert", params={"instant": "9999-12-31T23:00:00"})
    assert resp.status_code == 200
    assert resp.json()["event_local"] == "9999-12-31T23:59:59.999999"


def test_convert_clamps_at_start_of_range(client):
    resp = client.get(
        "/api/v1/clock/convert", params={"instant": "0001-01-01T00:30:00+02:00"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert datetime.fromisoformat(body["instant"].replace("Z", "+00:00")) == datetime.min.replace(
        tzinfo=timezone.utc,
    )
    assert body["event_local"] == "0001-01-01T02:00:00"


def test_convert_requires_instant(client):
    resp = client.get("/api/v1/clock/convert")
    assert resp.status_code == 400
