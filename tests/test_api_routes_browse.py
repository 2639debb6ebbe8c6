"""Tests for the browse API.

Tests /api/list and /api/idea/{id}/research defined in
idea_vault/api/routes/browse.py.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import make_settings


def _quick_add(client, headers, record_type, **payload):
    response = client.post(
        "/api/quick-add", json={"type": record_type, "payload": payload}, headers=headers
    )
    assert response.status_code == 200


class TestListRecords:
    """Tests for GET /api/list."""

    def test_newest_first(self, test_client, auth_headers):
        for name in ("first", "second", "third"):
            _quick_add(test_client, auth_headers, "tool", name=name)

        response = test_client.get("/api/list?type=tool", headers=auth_headers)

        assert response.status_code == 200
        assert [row["name"] for row in response.json()] == ["third", "second", "first"]

    def test_rows_carry_columns(self, test_client, auth_headers):
        _quick_add(test_client, auth_headers, "person", name="Jane", school="MIT")

        row = test_client.get("/api/list?type=person", headers=auth_headers).json()[0]

        assert row["name"] == "Jane"
        assert row["school"] == "MIT"
        assert row["phone"] is None
        assert "id" in row
        assert "created_at" in row

    def test_types_are_separate(self, test_client, auth_headers):
        _quick_add(test_client, auth_headers, "idea", title="Kettle")

        assert test_client.get("/api/list?type=tool", headers=auth_headers).json() == []

    @pytest.mark.parametrize("query", ["", "?type=", "?type=users", "?type=ingestion_event", "?type=IDEA"])
    def test_bad_type(self, test_client, auth_headers, query):
        response = test_client.get(f"/api/list{query}", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "bad type"}

    def test_limit_from_settings(self, auth_headers):
        from idea_vault.api.main import create_app

        with TestClient(create_app(make_settings(list_limit=2))) as client:
            for title in ("a", "b", "c"):
                _quick_add(client, auth_headers, "idea", title=title)

            rows = client.get("/api/list?type=idea", headers=auth_headers).json()

        assert [row["title"] for row in rows] == ["c", "b"]


class TestIdeaResearch:
    """Tests for GET /api/idea/{id}/research."""

    def test_groups_by_kind(self, test_client, auth_headers):
        for body in (
            {"rtype": "note", "idea_title": "Kettle", "note": "n1"},
            {"rtype": "note", "idea_title": "Kettle", "note": "n2"},
            {"rtype": "ref", "idea_title": "Kettle", "source_url": "https://x.io"},
            {"rtype": "fact", "idea_title": "Kettle", "fact": "f1"},
            {"rtype": "note", "idea_title": "Other", "note": "elsewhere"},
        ):
            data = test_client.post("/api/research-add", json=body, headers=auth_headers).json()
            if body["idea_title"] == "Kettle":
                idea_id = data["idea_id"]

        research = test_client.get(f"/api/idea/{idea_id}/research", headers=auth_headers).json()

        assert set(research) == {"notes", "refs", "facts"}
        assert [note["note"] for note in research["notes"]] == ["n2", "n1"]
        assert research["refs"][0]["source_url"] == "https://x.io"
        assert research["refs"][0]["source_title"] is None
        assert [fact["fact"] for fact in research["facts"]] == ["f1"]

    def test_unknown_idea_is_empty(self, test_client, auth_headers):
        response = test_client.get("/api/idea/404/research", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"notes": [], "refs": [], "facts": []}

    def test_non_integer_id(self, test_client, auth_headers):
        response = test_client.get("/api/idea/abc/research", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid request"}
