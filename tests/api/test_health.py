"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_returns_service_name(client):
    """Monitoring parses this field; it must not change silently."""
    response = client.get("/health")
    assert response.json()["service"] == "film-catalog"


def test_health_check_reports_database_status(client):
    response = client.get("/health")
    data = response.json()
    assert data["database"] == "healthy"
    assert data["status"] == "healthy"
