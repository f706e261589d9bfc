import pytest

from taskboard.greeting import create_app


@pytest.fixture
def client():
    return create_app().test_client()


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Hello, world!"
    assert response.mimetype == "text/plain"


def test_hello(client):
    response = client.get("/hello/Ann/30")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Hello, 30 year old named Ann"


def test_bye(client):
    response = client.get("/bye/Ann/30")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Goodbye, 30 year old named Ann"


@pytest.mark.parametrize("route", ["hello", "bye"])
def test_largest_age_is_accepted(client, route):
    response = client.get(f"/{route}/Bo/255")
    assert response.status_code == 200
    assert "255" in response.get_data(as_text=True)
    assert response.get_data(as_text=True).endswith("named Bo")


@pytest.mark.parametrize("age", ["256", "-1", "abc", "1000"])
def test_age_outside_range_matches_nothing(client, age):
    assert client.get(f"/hello/Ann/{age}").status_code == 404
    assert client.get(f"/bye/Ann/{age}").status_code == 404


def test_unknown_route(client):
    assert client.get("/hello/Ann").status_code == 404