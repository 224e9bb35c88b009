"""Rental creation, comments and likes through the API."""
import os

from sqlalchemy.exc import OperationalError

from app.services import listings
from app.services.auth import create_access_token
from app.services.storage import LocalStorage
from app.services.storage import get_storage
from app.main import app


def _image(name, size=10):
    return ("images", (name, b"\x89PNG" + b"0" * size, "image/png"))


def test_create_rental_multipart_with_images(signed_in, storage):
    c = signed_in("owner@example.com", name="Olive")
    res = c.post(
        "/api/rentals",
        data={"title": "  Sunny loft ", "description": "Skylights", "price": "1200.50", "location": "Uptown"},
        files=[_image("one.png"), _image("two photo.png")],
    )
    assert res.status_code == 201
    rental = res.json()["rental"]
    assert rental["title"] == "Sunny loft"
    assert rental["price"] == 1200.5
    assert rental["owner"]["name"] == "Olive"
    assert len(rental["images"]) == 2
    assert all(url.startswith("/uploads/") for url in rental["images"])
    assert rental["images"][0].endswith("one.png")
    assert rental["images"][1].endswith("two_photo.png")
    assert len(os.listdir(storage.root)) == 2


def test_create_rental_blank_price_means_no_price(signed_in):
    c = signed_in("owner@example.com")
    res = c.post("/api/rentals", data={"title": "Cheap", "price": ""})
    assert res.status_code == 201
    assert res.json()["rental"]["price"] is None


def test_create_rental_requires_auth(client):
    res = client.post("/api/rentals", json={"title": "Nope"})
    assert res.status_code == 401


def test_create_rental_validation(signed_in):
    c = signed_in("owner@example.com")
    res = c.post("/api/rentals", data={"title": "   ", "price": "cheap"})
    assert res.status_code == 400
    fields = {e["field"]: e["message"] for e in res.json()["errors"]}
    assert fields == {"title": "title cannot be empty", "price": "price must be a number"}


def test_create_rental_missing_title_json(signed_in):
    c = signed_in("owner@example.com")
    res = c.post("/api/rentals", json={"description": "no title"})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "title"


def test_create_rental_rejects_more_than_six_images(signed_in, storage):
    c = signed_in("owner@example.com")
    res = c.post(
        "/api/rentals",
        data={"title": "Gallery"},
        files=[_image(f"{i}.png") for i in range(7)],
    )
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "images"
    assert os.listdir(storage.root) == []
    assert c.get("/api/feed").json()["total"] == 0


def test_create_rental_rejects_oversize_upload(signed_in, tmp_path):
    small = LocalStorage(str(tmp_path / "small"), "/uploads", max_bytes=100)
    app.dependency_overrides[get_storage] = lambda: small
    c = signed_in("owner@example.com")
    res = c.post(
        "/api/rentals",
        data={"title": "Huge"},
        files=[_image("ok.png", size=10), _image("big.png", size=500)],
    )
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "images"
    assert os.listdir(small.root) == []


def test_uploads_removed_when_rental_insert_fails(signed_in, storage, monkeypatch):
    c = signed_in("owner@example.com")

    def broken(db, owner_id, data, images):
        raise OperationalError("INSERT INTO rentals", {}, Exception("database is locked"))

    monkeypatch.setattr(listings, "create_rental", broken)
    res = c.post("/api/rentals", data={"title": "Loft"}, files=[_image("one.png"), _image("two.png")])
    assert res.status_code == 500
    assert os.listdir(storage.root) == []


def test_comment_on_missing_rental_is_not_found_even_when_empty(signed_in):
    c = signed_in("owner@example.com")
    assert c.post("/api/rentals/999/comments", json={"text": ""}).status_code == 404
    assert c.post("/api/rentals/999/comments", json={"text": "hi"}).status_code == 404
    assert c.post("/api/rentals/999/comments").status_code == 404


def test_comment_on_missing_rental_is_not_found_for_non_object_bodies(signed_in):
    c = signed_in("owner@example.com")
    json_header = {"Content-Type": "application/json"}
    assert c.post("/api/rentals/999/comments", json="").status_code == 404
    assert c.post("/api/rentals/999/comments", content="{not json", headers=json_header).status_code == 404
    assert c.post("/api/rentals/999/comments", json=["x"]).status_code == 404


def test_comment_with_non_object_body_on_existing_rental(signed_in):
    c = signed_in("owner@example.com")
    rental_id = c.post("/api/rentals", json={"title": "Loft"}).json()["rental"]["id"]
    res = c.post(f"/api/rentals/{rental_id}/comments", json=["x"])
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "body"
    res = c.post(
        f"/api/rentals/{rental_id}/comments", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert res.status_code == 400


def test_comment_validation_on_existing_rental(signed_in):
    c = signed_in("owner@example.com")
    rental_id = c.post("/api/rentals", json={"title": "Loft"}).json()["rental"]["id"]
    res = c.post(f"/api/rentals/{rental_id}/comments", json={"text": "   "})
    assert res.status_code == 400
    assert res.json()["errors"] == [{"field": "text", "message": "text cannot be empty"}]


def test_comment_created(signed_in):
    c = signed_in("owner@example.com", name="Olive")
    rental_id = c.post("/api/rentals", json={"title": "Loft"}).json()["rental"]["id"]
    res = c.post(f"/api/rentals/{rental_id}/comments", json={"text": " Looks great "})
    assert res.status_code == 201
    comment = res.json()["comment"]
    assert comment["text"] == "Looks great"
    assert comment["user_name"] == "Olive"


def test_comment_requires_auth(client):
    assert client.post("/api/rentals/1/comments", json={"text": "hi"}).status_code == 401


def test_like_missing_rental(signed_in):
    c = signed_in("owner@example.com")
    assert c.post("/api/rentals/999/like").status_code == 404


def test_likes_from_two_users_are_counted_separately(signed_in):
    owner = signed_in("owner@example.com")
    fan = signed_in("fan@example.com")
    rental_id = owner.post("/api/rentals", json={"title": "Loft"}).json()["rental"]["id"]
    assert owner.post(f"/api/rentals/{rental_id}/like").json()["liked"] is True
    assert fan.post(f"/api/rentals/{rental_id}/like").json()["liked"] is True
    assert owner.get(f"/api/rentals/{rental_id}").json()["rental"]["likes"] == 2
    assert fan.post(f"/api/rentals/{rental_id}/like").json()["liked"] is False
    assert owner.get(f"/api/rentals/{rental_id}").json()["rental"]["likes"] == 1


def test_writes_for_deleted_account_are_unauthorized(signed_in, make_client):
    owner = signed_in("owner@example.com")
    rental_id = owner.post("/api/rentals", json={"title": "Loft"}).json()["rental"]["id"]
    ghost = make_client()
    ghost.headers["Authorization"] = f"Bearer {create_access_token(9999, 'ghost@example.com')}"

    res = ghost.post("/api/rentals", json={"title": "Haunted"})
    assert res.status_code == 401
    assert res.json()["error"] == "Account no longer exists"
    assert ghost.post(f"/api/rentals/{rental_id}/comments", json={"text": "boo"}).status_code == 401
    assert ghost.post(f"/api/rentals/{rental_id}/like").status_code == 401
    assert ghost.post("/api/todos", json={"text": "haunt"}).status_code == 401
    assert owner.get("/api/feed").json()["total"] == 1
