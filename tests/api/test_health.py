"""
API tests for `api/health.py` and the Prometheus mount in `main.py`.
"""

from fastapi.testclient import TestClient

from main import app
from version import __version__

client = TestClient(app)


def test_health_reports_backend_and_version():
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["backend"] == "rule_based"
    assert body["version"] == __version__
    assert "timestamp" in body


def test_metrics_endpoint_counts_chat_requests():
    client.post("/api/chat", json={"message": "hello"})
    resp = client.get("/metrics/")
    assert resp.status_code == 200
    assert "chat_requests_total" in resp.text


def test_health_normalizes_backend_name(monkeypatch):
    from config import CONFIG

    monkeypatch.setitem(CONFIG["assistant"], "backend", " LLM ")
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["backend"] == "llm"


def test_health_reports_unknown_backend(monkeypatch):
    from config import CONFIG

    monkeypatch.setitem(CONFIG["assistant"], "backend", "quantum")
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "degraded"
    assert body["backend"] is None
    assert "quantum" in body["error"]
