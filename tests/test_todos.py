"""Todo CRUD and ownership rules."""


def _create(c, text="Write tests"):
    return c.post("/api/todos", json={"text": text})


def test_create_list_patch_delete(signed_in):
    c = signed_in("tester@example.com")
    res = _create(c)
    assert res.status_code == 201
    todo = res.json()["todo"]
    assert todo["text"] == "Write tests"
    assert todo["done"] is False

    todos = c.get("/api/todos").json()["todos"]
    assert [t["id"] for t in todos] == [todo["id"]]

    res = c.patch(f"/api/todos/{todo['id']}", json={"done": True})
    assert res.status_code == 200
    assert res.json()["todo"]["done"] is True
    assert res.json()["todo"]["text"] == "Write tests"

    res = c.patch(f"/api/todos/{todo['id']}", json={"text": "Write more tests"})
    assert res.json()["todo"]["text"] == "Write more tests"
    assert res.json()["todo"]["done"] is True

    res = c.delete(f"/api/todos/{todo['id']}")
    assert res.status_code == 200
    assert res.json()["message"] == "Deleted"
    assert c.get("/api/todos").json()["todos"] == []


def test_list_is_newest_first_and_private(signed_in):
    alice = signed_in("alice@example.com")
    bob = signed_in("bob@example.com")
    first = _create(alice, "one").json()["todo"]["id"]
    second = _create(alice, "two").json()["todo"]["id"]
    _create(bob, "bob's")
    assert [t["id"] for t in alice.get("/api/todos").json()["todos"]] == [second, first]
    assert [t["text"] for t in bob.get("/api/todos").json()["todos"]] == ["bob's"]


def test_create_requires_text(signed_in):
    c = signed_in("tester@example.com")
    res = _create(c, "   ")
    assert res.status_code == 400
    assert res.json()["errors"] == [{"field": "text", "message": "text cannot be empty"}]


def test_todos_require_auth(client):
    assert client.get("/api/todos").status_code == 401
    assert _create(client).status_code == 401


def test_empty_patch_is_rejected(signed_in):
    c = signed_in("tester@example.com")
    todo_id = _create(c).json()["todo"]["id"]
    res = c.patch(f"/api/todos/{todo_id}", json={})
    assert res.status_code == 400
    assert res.json()["errors"][0]["message"] == "Nothing to update"


def test_patch_by_non_owner_is_forbidden(signed_in):
    alice = signed_in("alice@example.com")
    mallory = signed_in("mallory@example.com")
    todo_id = _create(alice).json()["todo"]["id"]

    assert mallory.patch(f"/api/todos/{todo_id}", json={"done": True}).status_code == 403
    assert mallory.delete(f"/api/todos/{todo_id}").status_code == 403
    assert mallory.get(f"/api/todos/{todo_id}").status_code == 403
    assert alice.get(f"/api/todos/{todo_id}").json()["todo"]["done"] is False


def test_missing_todo_is_not_found(signed_in):
    c = signed_in("tester@example.com")
    assert c.patch("/api/todos/999", json={"done": True}).status_code == 404
    assert c.delete("/api/todos/999").status_code == 404
    assert c.get("/api/todos/999").status_code == 404
