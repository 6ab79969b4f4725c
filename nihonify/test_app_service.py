from __future__ import annotations

from typing import Iterable

import pytest
from fastapi.testclient import TestClient

from . import app as app_module


@pytest.fixture
def client() -> Iterable[TestClient]:
    with TestClient(app_module.app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_health_endpoint_returns_uptime_and_version(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "uptime_seconds" in data
    assert "version" in data
    assert "X-Request-ID" in response.headers


def test_health_ready_reports_table_size(client: TestClient) -> None:
    response = client.get("/health/ready")
    assert response.status_code == 200
    assert response.json()["eras"] > 200


def test_request_id_header_is_reused_from_client(client: TestClient) -> None:
    custom_request_id = "test-request-123"
    response = client.get("/health", headers={"X-Request-ID": custom_request_id})
    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == custom_request_id


def test_nenkou_endpoint(client: TestClient) -> None:
    response = client.get("/api/nenkou", params={"date": "2021-11-12"})
    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2021-11-12"
    assert data["nenkou"] == "令和３年１１月１２日"
    assert data["era"]["romaji"] == "reiwa"
    assert data["era"]["is_current"] is True
    assert data["era"]["ended_at"] is None


def test_nenkou_endpoint_rejects_invalid_date(client: TestClient) -> None:
    response = client.get("/api/nenkou", params={"date": "2021-02-30"})
    assert response.status_code == 422


def test_nenkou_endpoint_outside_era_range(client: TestClient) -> None:
    response = client.get("/api/nenkou", params={"date": "0600-01-01"})
    assert response.status_code == 404


def test_resolve_endpoint(client: TestClient) -> None:
    response = client.get("/api/eras/resolve", params={"timestamp": -1556668810})
    assert response.status_code == 200
    data = response.json()
    assert data["kanji"] == "大正"
    assert data["jidai"] == "modern"

    missing = client.get("/api/eras/resolve", params={"timestamp": -41795654401})
    assert missing.status_code == 404


def test_list_eras_filters_by_jidai(client: TestClient) -> None:
    response = client.get("/api/eras", params={"jidai": "modern"})
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert [era["kanji"] for era in data["eras"]] == ["明治", "大正", "昭和", "平成", "令和"]

    everything = client.get("/api/eras").json()
    assert everything["total"] > data["total"]
    assert everything["eras"][0]["romaji"] == "taika"


def test_parse_endpoint(client: TestClient) -> None:
    response = client.get("/api/nenkou/parse", params={"text": "平成元年1月8日"})
    assert response.status_code == 200
    assert response.json()["date_iso"] == "1989-01-08"

    missing = client.get("/api/nenkou/parse", params={"text": "no era"})
    assert missing.status_code == 404


def test_detect_endpoint(client: TestClient) -> None:
    response = client.post("/api/detect", json={"text": "日本語の文です。"})
    assert response.status_code == 200
    assert response.json()["is_japanese"] is True

    response = client.post("/api/detect", json={"text": "Hello, world!"})
    assert response.json()["is_japanese"] is False


def test_unhandled_exception_returns_request_id(client: TestClient) -> None:
    if not any(
        getattr(route, "path", None) == "/_test-error"
        for route in app_module.app.router.routes
    ):

        @app_module.app.get("/_test-error")
        async def _raise_error() -> None:  # pragma: no cover - exercised in test
            raise RuntimeError("boom")

    response = client.get("/_test-error")
    assert response.status_code == 500
    data = response.json()
    assert "request_id" in data
    assert response.headers["X-Request-ID"] == data["request_id"]
