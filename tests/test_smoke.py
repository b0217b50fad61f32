import pytest

from app.customer_api import create_app
from app.customer_api.config import load_settings


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "1")

    app = create_app()
    return app.test_client()


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["ok"] is True


def test_healthz_plain_text(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.data == b"ok"


def test_request_id_header(client):
    a = client.get("/health").headers.get("X-Request-ID")
    b = client.get("/health").headers.get("X-Request-ID")
    assert a and b and a != b


def test_unknown_route_is_json_404(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json == {"error": "Not Found"}


def test_unsupported_verb_is_json_405(client):
    r = client.patch("/hello", json={"CustomerId": 1})
    assert r.status_code == 405
    assert r.json == {"error": "Method Not Allowed"}


def test_settings_defaults(monkeypatch):
    for k in ("ENV", "DATABASE_URL", "LOG_LEVEL", "AUTO_CREATE_SCHEMA"):
        monkeypatch.delenv(k, raising=False)
    s = load_settings()
    assert s.env == "development"
    assert s.database_url == "sqlite:///customers.db"
    assert s.log_level == "INFO"
    assert s.auto_create_schema is True


def test_production_does_not_auto_create_schema(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.delenv("AUTO_CREATE_SCHEMA", raising=False)
    assert load_settings().auto_create_schema is False


def test_production_rejects_sqlite(tmp_path, monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'prod.db'}")
    with pytest.raises(RuntimeError, match="Postgres"):
        create_app()
