# tests/test_app.py
def test_healthz_and_readyz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.get_json()["db"] == "up"

    r = client.get("/readyz")
    assert r.status_code == 200
    assert r.get_json() == {"db": "up", "redis": "n/a", "status": "ok"}


def test_request_id_and_security_headers(client):
    r = client.get("/healthz", headers={"X-Request-Id": "req-123"})
    assert r.headers["X-Request-Id"] == "req-123"
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"

    assert client.get("/healthz").headers["X-Request-Id"]


def test_unknown_route_is_json(client):
    r = client.get("/api/v1/nope")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "http_error"
