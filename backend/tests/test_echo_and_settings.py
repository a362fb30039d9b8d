from datetime import datetime, timezone

from services.echo import build_echo, resolve_name
from settings import Settings


def test_resolve_name_order():
    assert resolve_name("Ada", "Grace") == "Ada"
    assert resolve_name(None, " Grace ") == "Grace"
    assert resolve_name("", "") == "Unknown"
    assert resolve_name(None, None) == "Unknown"


def test_build_echo_uses_given_time():
    now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert build_echo("Ada", now) == {"name": "Ada", "timestamp": "2024-01-02T03:04:05+00:00"}


def test_settings_defaults(monkeypatch):
    for var in ("LOG_LEVEL", "BOOKS_SEED_ENABLED", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert s.LOG_LEVEL == "INFO"
    assert s.BOOKS_SEED_ENABLED is True
    assert s.CORS_ALLOW_ORIGINS == ["*"]


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("BOOKS_SEED_ENABLED", "false")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
    s = Settings()
    assert s.BOOKS_SEED_ENABLED is False
    assert s.CORS_ALLOW_ORIGINS == ["http://a.test", "http://b.test"]


def test_app_without_seed(monkeypatch):
    from fastapi.testclient import TestClient
    from api.main import create_app

    monkeypatch.setenv("BOOKS_SEED_ENABLED", "0")
    client = TestClient(create_app(settings=Settings()))
    assert client.get("/books").json() == []
    assert client.post("/books", json={"title": "T", "author": "A"}).json()["id"] == 1
    assert client.get("/health").json() == {"status": "healthy"}
