import pytest

from taskboard.status import TaskStatus


def test_stringify_done():
    assert TaskStatus.DONE.stringify() == "DONE"


def test_stringify_pending():
    assert TaskStatus.PENDING.stringify() == "PENDING"


@pytest.mark.parametrize("status", list(TaskStatus))
def test_round_trip(status):
    assert TaskStatus.from_string(status.stringify()) is status


@pytest.mark.parametrize(
    "status, expected",
    [(TaskStatus.DONE, "DONE"), (TaskStatus.PENDING, "PENDING")],
)
def test_str_matches_stringify(status, expected):
    assert str(status) == status.stringify() == expected


@pytest.mark.parametrize("text", ["done", "Pending", "", "FINISHED"])
def test_unsupported_input_raises(text):
    with pytest.raises(ValueError, match="not supported"):
        TaskStatus.from_string(text)