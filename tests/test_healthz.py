"""
Test health, root and metrics endpoints.
"""


def test_health_check(test_client):
    """Health endpoint reports service identity."""
    response = test_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()

    # Check required fields
    assert data["status"] == "ok"
    assert data["version"] == "1.0.0"
    assert data["service"] == "palettelab-backend"


def test_root_points_to_docs(test_client):
    response = test_client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_metrics_reflect_requests(test_client):
    """Conversions are counted per source representation."""
    test_client.get("/api/colors/convert", params={"hex": "#3b82f6"})
    test_client.get("/api/colors/convert", params={"hex": "zzz"})

    response = test_client.get("/metrics")
    assert response.status_code == 200
    data = response.json()

    assert data["counters"]["conversions_total_hex"] == 1
    assert data["counters"]["failed_total_invalid_format"] == 1
    assert data["uptime_seconds"] >= 0
