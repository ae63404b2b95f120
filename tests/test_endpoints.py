import re

from fastapi.testclient import TestClient

from htmx_todo.app.main import create_app


def item_listing(page: str) -> str:
    match = re.search(r'<div id="todos"[^>]*>(.*?)</div>', page, re.S)
    assert match is not None
    return match.group(1)


def test_index_renders_empty_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    body = response.text
    assert body.startswith("<!DOCTYPE html>")
    assert '<form id="todo-form" hx-post="/todo" hx-swap="none"' in body
    assert 'name="todoItem"' in body
    # the input is cleared once a submission succeeds
    assert 'hx-on::after-request="if(event.detail.successful) this.reset()"' in body
    assert '<div id="todo-input-error"></div>' in body
    assert item_listing(body) == ""


def test_index_lists_newest_first(client, store):
    store.add("older")
    store.add("newer")
    listing = item_listing(client.get("/").text)
    assert listing.index("newer") < listing.index("older")


def test_index_is_stable_without_mutation(client, store):
    for text in ("a", "b", "c"):
        store.add(text)
    first = item_listing(client.get("/").text)
    second = item_listing(client.get("/").text)
    assert first == second


def test_create_returns_out_of_band_fragments(client, store):
    response = client.post("/todo", data={"todoItem": "Buy milk"})
    assert response.status_code == 200
    [item] = store.list_all_newest_first()
    body = response.text
    assert f'<div id="todos" hx-swap-oob="afterbegin"><p id="{item.id}"' in body
    assert "Buy milk</p>" in body
    assert '<div id="todo-input-error" hx-swap-oob="true"></div>' in body
    assert "HX-Retarget" not in response.headers


def test_created_item_deletes_itself(client, store):
    response = client.post("/todo", data={"todoItem": "Buy milk"})
    [item] = store.list_all_newest_first()
    assert f'hx-delete="/todo/{item.id}"' in response.text
    assert 'hx-swap="delete"' in response.text


def test_create_empty_is_rejected(client, store):
    response = client.post("/todo", data={"todoItem": ""})
    assert response.status_code == 422
    assert response.headers["HX-Retarget"] == "#todo-input-error"
    assert response.headers["HX-Reswap"] == "innerHTML"
    assert response.text
    assert len(store) == 0


def test_create_without_field_is_rejected(client, store):
    response = client.post("/todo", data={})
    assert response.status_code == 422
    assert response.headers["HX-Retarget"] == "#todo-input-error"
    assert len(store) == 0


def test_create_duplicate_is_rejected(client, store):
    assert client.post("/todo", data={"todoItem": "Buy milk"}).status_code == 200
    response = client.post("/todo", data={"todoItem": "Buy milk"})
    assert response.status_code == 422
    assert response.text == "Error: Todo is empty or already exists!"
    assert len(store) == 1


def test_create_escapes_text(client):
    response = client.post("/todo", data={"todoItem": "<script>alert(1)</script>"})
    assert response.status_code == 200
    assert "<script>" not in response.text
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in response.text
    assert "<script>alert" not in item_listing(client.get("/").text)


def test_delete_existing(client, store):
    todo_id = store.add("Buy milk")
    response = client.delete(f"/todo/{todo_id}")
    assert response.status_code == 200
    assert response.content == b""
    assert "Buy milk" not in client.get("/").text


def test_delete_unknown(client):
    response = client.delete("/todo/unknown-id")
    assert response.status_code == 404
    assert response.content == b""


def test_delete_id_with_slash(client):
    for path in ("/todo/a%2Fb", "/todo/a/b"):
        response = client.delete(path)
        assert response.status_code == 404
        assert response.content == b""


def test_delete_twice(client, store):
    todo_id = store.add("Buy milk")
    assert client.delete(f"/todo/{todo_id}").status_code == 200
    assert client.delete(f"/todo/{todo_id}").status_code == 404


def test_static_script_is_served(client):
    response = client.get("/static/todo.js")
    assert response.status_code == 200
    assert "htmx:beforeSwap" in response.text
    assert client.get("/static/missing.js").status_code == 404


def test_unhandled_error_returns_500(store, monkeypatch):
    def broken():
        raise RuntimeError("store exploded")

    monkeypatch.setattr(store, "list_all_newest_first", broken)
    client = TestClient(create_app(store), raise_server_exceptions=False)
    response = client.get("/")
    assert response.status_code == 500
    assert response.text.startswith("500: ")
    assert "store exploded" in response.text

    # the application keeps serving
    assert client.delete("/todo/unknown-id").status_code == 404


def test_apps_do_not_share_state():
    first = TestClient(create_app())
    second = TestClient(create_app())
    first.post("/todo", data={"todoItem": "only here"})
    assert "only here" in first.get("/").text
    assert "only here" not in second.get("/").text
