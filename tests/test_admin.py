import os

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_admin_reload_unauthorized():
    r = client.post("/admin/reload", headers={"x-admin-token": "wrong"})
    assert r.status_code == 401


def test_admin_reload_not_configured(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "")
    r = client.post("/admin/reload")
    assert r.status_code == 500


def test_admin_reload_ok():
    r = client.post("/admin/reload", headers={"x-admin-token": os.environ["ADMIN_TOKEN"]})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["exercises"] >= 1 and body["quizzes"] >= 1
