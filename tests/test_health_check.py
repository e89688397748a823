from unittest.mock import patch

from pymongo.errors import ServerSelectionTimeoutError


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "services" in data

    def test_health_check_reports_store_status(self, client):
        response = client.get("/health")
        data = response.json()
        assert data["services"]["store"]["status"] == "up"
        assert "response_time_ms" in data["services"]["store"]

    def test_health_check_unreachable_store_returns_503(self, client, store):
        with patch.object(
            type(store), "ping", side_effect=ServerSelectionTimeoutError("down")
        ):
            response = client.get("/health")
        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["store"] == {"status": "down"}
