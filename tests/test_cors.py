from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.cors import CORS_HEADERS, ApiCorsMiddleware


def _app():
    app = FastAPI()
    app.add_middleware(ApiCorsMiddleware, path_prefix="/api")

    @app.get("/api/ping")
    def ping():
        return {"pong": True}

    @app.get("/apiary")
    def apiary():
        return {"bees": True}

    @app.get("/other")
    def other():
        return {"ok": True}

    return app


def test_headers_added_under_prefix():
    r = TestClient(_app()).get("/api/ping")
    assert r.status_code == 200
    for name, value in CORS_HEADERS.items():
        assert r.headers[name] == value


def test_preflight_short_circuits_any_api_path():
    r = TestClient(_app()).options("/api/does-not-exist")
    assert r.status_code == 204
    assert r.content == b""
    assert r.headers["access-control-allow-origin"] == "*"


def test_paths_outside_prefix_untouched():
    client = TestClient(_app())
    assert "access-control-allow-origin" not in client.get("/other").headers
    assert "access-control-allow-origin" not in client.get("/apiary").headers


def test_health_is_outside_prefix(client):
    r = client.get("/health")
    assert r.json() == {"status": "ok"}
    assert "access-control-allow-origin" not in r.headers


def test_health_db_closes_session_on_failure(client, monkeypatch):
    import app.db.session as session_mod

    closed = []

    class _BrokenSession:
        def __enter__(self):
            return self

        def __exit__(self, *exc):
            closed.append(True)
            return False

        def execute(self, statement):
            raise RuntimeError("db down")

    monkeypatch.setattr(session_mod, "SessionLocal", lambda: _BrokenSession())
    r = client.get("/health/db")
    assert r.json() == {"status": "error", "database": "db down"}
    assert closed == [True]


def test_health_db_ok(client):
    assert client.get("/health/db").json() == {"status": "ok", "database": "connected"}
