"""
Tests for the public health endpoint.
"""

from fastapi.testclient import TestClient

from betelsec.main import app


def test_health_check():
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "betelsec-risk-assessment"}
