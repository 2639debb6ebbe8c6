"""Tests for API key enforcement on the /api endpoints."""

import pytest
from fastapi.testclient import TestClient

from conftest import TEST_API_KEY, make_settings

PROTECTED = [
    ("post", "/api/quick-add", {"json": {"type": "idea", "payload": {"title": "x"}}}),
    ("post", "/api/quick-add", {"json": {}}),
    ("post", "/api/quick-add", {"content": b"garbage"}),
    ("post", "/api/research-add", {"json": {"rtype": "note", "idea_title": "x", "note": "y"}}),
    ("post", "/api/research-add", {"json": {"rtype": "bogus"}}),
    ("get", "/api/list?type=idea", {}),
    ("get", "/api/list?type=bogus", {}),
    ("get", "/api/idea/1/research", {}),
]


class TestApiKeyRequired:
    """Every /api data endpoint rejects requests without the right key."""

    @pytest.mark.parametrize("method,path,kwargs", PROTECTED)
    def test_missing_key(self, test_client, method, path, kwargs):
        response = getattr(test_client, method)(path, **kwargs)

        assert response.status_code == 401
        assert response.json() == {"error": "bad key"}

    @pytest.mark.parametrize("method,path,kwargs", PROTECTED)
    def test_wrong_key(self, test_client, method, path, kwargs):
        response = getattr(test_client, method)(path, headers={"x-api-key": "nope"}, **kwargs)

        assert response.status_code == 401
        assert response.json() == {"error": "bad key"}

    def test_rejected_write_stores_nothing(self, test_client, auth_headers):
        test_client.post("/api/quick-add", json={"type": "idea", "payload": {"title": "x"}})

        assert test_client.get("/api/list?type=idea", headers=auth_headers).json() == []


class TestApiKeySources:
    """Tests for where the key may be supplied."""

    def test_header(self, test_client, auth_headers):
        assert test_client.get("/api/list?type=idea", headers=auth_headers).status_code == 200

    def test_query_parameter(self, test_client):
        response = test_client.get(f"/api/list?type=idea&key={TEST_API_KEY}")
        assert response.status_code == 200

    def test_header_wins_over_query(self, test_client):
        response = test_client.get(
            f"/api/list?type=idea&key={TEST_API_KEY}", headers={"x-api-key": "nope"}
        )
        assert response.status_code == 401

    def test_unconfigured_key_rejects_everything(self):
        from idea_vault.api.main import create_app

        with TestClient(create_app(make_settings(api_key=""))) as client:
            assert client.get("/api/list?type=idea").status_code == 401
            assert client.get("/api/list?type=idea&key=").status_code == 401
            assert client.get("/api/list?type=idea", headers={"x-api-key": ""}).status_code == 401


class TestPublicEndpoints:
    """Pages, health and the webhook stay open."""

    @pytest.mark.parametrize("path", ["/app", "/add", "/api/health"])
    def test_open_pages(self, test_client, path):
        assert test_client.get(path).status_code == 200
