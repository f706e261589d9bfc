from datetime import datetime

import pytest

from taskboard.config import Config
from taskboard.database import Database, DatabaseUnavailable, metadata, new_item


@pytest.fixture
def database(tmp_path):
    db = Database.from_config(Config({"DB_URL": f"sqlite:///{tmp_path / 'tasks.db'}"}))
    metadata.create_all(db.engine)
    return db


def test_new_item_is_pending_and_current():
    before = datetime.now()
    values = new_item("wash")
    after = datetime.now()
    assert values["title"] == "wash"
    assert values["status"] == "PENDING"
    assert before <= values["date"] <= after


def test_create_then_load(database):
    assert database.create("wash") is True
    items = database.load_items()
    assert [(item.title, item.status) for item in items] == [("wash", "PENDING")]


def test_create_skips_existing_title(database):
    database.create("wash")
    assert database.create("wash") is False
    assert len(database.load_items()) == 1


def test_load_orders_by_id(database):
    for title in ["c", "a", "b"]:
        database.create(title)
    items = database.load_items()
    assert [item.title for item in items] == ["c", "a", "b"]
    ids = [item.id for item in items]
    assert ids == sorted(ids)


def test_mark_done(database):
    database.create("wash")
    database.create("cook")
    assert database.mark_done("wash") == 1
    statuses = {item.title: item.status for item in database.load_items()}
    assert statuses == {"wash": "DONE", "cook": "PENDING"}


def test_mark_done_unknown_title_changes_nothing(database):
    database.create("wash")
    assert database.mark_done("absent") == 0
    assert database.load_items()[0].status == "PENDING"


def test_delete(database):
    database.create("wash")
    database.create("cook")
    database.delete("wash")
    assert [item.title for item in database.load_items()] == ["cook"]


def test_delete_missing_raises(database):
    with pytest.raises(KeyError):
        database.delete("absent")


def test_from_config_requires_url():
    with pytest.raises(ValueError):
        Database.from_config(Config({}))


def test_unreachable_database(tmp_path):
    db = Database.from_config(
        Config({"DB_URL": f"sqlite:///{tmp_path / 'missing' / 'tasks.db'}"})
    )
    with pytest.raises(DatabaseUnavailable):
        db.load_items()