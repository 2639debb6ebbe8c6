"""Tests for the static pages and health endpoint.

Tests the routes defined in idea_vault/api/routes/pages.py.
"""

from idea_vault import __version__


class TestPages:
    """Tests for the HTML pages."""

    def test_root_redirects_to_app(self, test_client):
        response = test_client.get("/", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/app"

    def test_app_page(self, test_client):
        response = test_client.get("/app")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/api/list" in response.text

    def test_add_page(self, test_client):
        response = test_client.get("/add")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/api/quick-add" in response.text
        assert "/api/research-add" in response.text


class TestHealthCheck:
    """Tests for GET /api/health."""

    def test_health_check_success(self, test_client):
        """Test health check returns healthy status with a live database."""
        response = test_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["version"] == __version__
        assert "timestamp" in data

    def test_health_check_degraded(self, test_client, mocker):
        """Test health check reports degraded when the database is unreachable."""
        mocker.patch(
            "idea_vault.api.routes.pages.check_database_connection",
            return_value=False,
        )

        response = test_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["database"] == "disconnected"
