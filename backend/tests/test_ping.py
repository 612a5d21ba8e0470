from fastapi.testclient import TestClient
from liftlog.main import app

client = TestClient(app)

def test_root():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "name": "Liftlog API"}

def test_ping():
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.json() == {"pong": True}

def test_healthz():
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_version():
    r = client.get("/version")
    assert r.status_code == 200
    assert r.json()["version"] == "dev"

def test_request_id_is_echoed():
    r = client.get("/ping", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"
    assert client.get("/ping").headers["X-Request-ID"]
