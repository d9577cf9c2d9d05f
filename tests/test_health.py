"""Tests for the bundled webhook receiver app."""

from fastapi.testclient import TestClient

from gocardless_client.main import app


def test_health():
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_webhook_route_mounted():
    response = TestClient(app).post("/webhooks", content="{}", headers={"Webhook-Signature": "nope"})
    assert response.status_code == 498
