"""Tests for environment-driven settings and app construction."""
from fastapi.testclient import TestClient

from customer_api import create_app
from customer_api.core.config import load_settings


def test_defaults(monkeypatch):
    for k in ("PROJECT_NAME", "API_VERSION", "DATABASE_URL", "DB_ECHO", "LOG_LEVEL", "LOG_FILE", "CORS_ORIGINS"):
        monkeypatch.delenv(k, raising=False)

    s = load_settings()
    assert s.project_name == "Customer API"
    assert s.database_url == "sqlite:///customers.sqlite"
    assert s.db_echo is False
    assert s.cors_origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.sqlite")
    monkeypatch.setenv("DB_ECHO", "yes")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")

    s = load_settings()
    assert s.database_url == "sqlite:///other.sqlite"
    assert s.db_echo is True
    assert s.cors_origins == ["http://a.example", "http://b.example"]


def test_create_app_reads_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "env.sqlite"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.setenv("PROJECT_NAME", "Test Customers")

    app = create_app()
    assert app.title == "Test Customers"

    with TestClient(app) as client:
        assert client.get("/customer").status_code == 404
    app.state.engine.dispose()

    assert db_path.exists()
