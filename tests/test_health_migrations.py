from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health_db():
    r = client.get("/health/db")
    assert r.status_code == 200 and r.json()["ok"] is True


def test_health_content():
    b = client.get("/health/content").json()
    assert b["ok"] is True and b["exercises"] >= 1


def test_health_migrations_basic():
    r = client.get("/health/migrations")
    assert r.status_code == 200
    b = r.json()
    assert "code_heads" in b and isinstance(b["code_heads"], list)
    assert "db_version" in b
