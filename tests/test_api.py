import json

import pytest

from taskboard.api import create_app, create_auth_app
from taskboard.state import read_file


@pytest.fixture
def state_file(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"wash": "PENDING", "cook": "DONE"}), encoding="utf-8")
    return path


@pytest.fixture
def client(state_file):
    return create_app(state_file).test_client()


def test_get_lists_items(client):
    response = client.get("/v1/item/get")
    assert response.status_code == 200
    body = response.get_json()
    assert body["pending_items"] == [{"title": "wash", "status": "PENDING"}]
    assert body["done_items"] == [{"title": "cook", "status": "DONE"}]
    assert body["pending_item_count"] == 1
    assert body["done_item_count"] == 1


def test_create_adds_pending_item(client, state_file):
    response = client.post("/v1/item/create/shop")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "shop created"
    assert read_file(state_file)["shop"] == "PENDING"


def test_create_requires_post(client):
    assert client.get("/v1/item/create/shop").status_code == 405


def test_edit_toggles_pending_to_done(client, state_file):
    response = client.post("/v1/item/edit", json={"title": "wash", "status": "DONE"})
    assert response.status_code == 200
    assert read_file(state_file)["wash"] == "DONE"
    body = response.get_json()
    assert {"title": "wash", "status": "DONE"} in body["done_items"]


def test_edit_toggles_done_to_pending(client, state_file):
    response = client.post("/v1/item/edit", json={"title": "cook", "status": "PENDING"})
    assert response.status_code == 200
    assert read_file(state_file)["cook"] == "PENDING"


def test_edit_with_same_status_changes_nothing(client, state_file):
    before = state_file.read_text(encoding="utf-8")
    response = client.post("/v1/item/edit", json={"title": "wash", "status": "PENDING"})
    assert response.status_code == 200
    assert state_file.read_text(encoding="utf-8") == before


def test_edit_unknown_title_is_not_found(client):
    response = client.post("/v1/item/edit", json={"title": "fly", "status": "DONE"})
    assert response.status_code == 404
    assert response.get_json() == "fly not in state"


def test_edit_bad_body_is_rejected(client):
    response = client.post("/v1/item/edit", json={"title": "wash"})
    assert response.status_code == 400


def test_edit_bad_status_is_rejected(client, state_file):
    before = state_file.read_text(encoding="utf-8")
    response = client.post("/v1/item/edit", json={"title": "wash", "status": "later"})
    assert response.status_code == 400
    assert state_file.read_text(encoding="utf-8") == before


@pytest.mark.parametrize("view, text", [("login", "Login view"), ("logout", "Logout view")])
def test_auth_views(view, text):
    client = create_auth_app().test_client()
    response = client.get(f"/v1/auth/{view}")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == text


def test_auth_app_has_no_task_views():
    client = create_auth_app().test_client()
    assert client.get("/v1/item/get").status_code == 404