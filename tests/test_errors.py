"""Error responses at the application boundary."""
from sqlalchemy.exc import OperationalError

from app.services import listings


def test_store_failure_is_generic_internal_error(client, monkeypatch):
    def broken(db):
        raise OperationalError("SELECT count(*) FROM rentals", {}, Exception("disk I/O error"))

    monkeypatch.setattr(listings, "count_rentals", broken)
    res = client.get("/api/feed")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error", "code": "internal_error"}
    assert "disk" not in res.text


def test_unknown_route_uses_error_shape(client):
    res = client.get("/api/nowhere")
    assert res.status_code == 404
    assert res.json()["code"] == "http_error"


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_request_id_is_echoed(client):
    res = client.get("/api/health", headers={"X-Request-ID": "abc123"})
    assert res.headers["X-Request-ID"] == "abc123"
    assert client.get("/api/health").headers["X-Request-ID"]
