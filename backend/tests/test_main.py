"""
Application wiring tests
"""


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"
    assert "X-Process-Time" in response.headers


def test_correlation_id_is_generated(client):
    response = client.get("/")

    assert response.headers["X-Correlation-ID"]


def test_validation_errors_are_bad_requests(client):
    response = client.post("/api/auth/login", json={"username": "only"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    assert body["details"][0]["loc"] == ["body", "password"]
