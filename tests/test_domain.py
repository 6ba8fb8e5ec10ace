from datetime import datetime, timedelta, timezone

import pytest

from taskmanager.domain import ZERO_TIME, Priority, Status, Task


@pytest.mark.parametrize(
    "member, text",
    [(Priority.LOW, "low"), (Priority.MEDIUM, "medium"), (Priority.HIGH, "high")],
)
def test_priority_str_and_decode(member, text):
    assert str(member) == text
    assert Priority.from_json(text) is member


@pytest.mark.parametrize(
    "member, text",
    [(Status.TODO, "todo"), (Status.IN_PROGRESS, "in_progress"), (Status.DONE, "done")],
)
def test_status_str_and_decode(member, text):
    assert str(member) == text
    assert Status.from_json(text) is member


@pytest.mark.parametrize("value", ["urgent", 2, None, "HIGH"])
def test_unknown_priority_falls_back_to_low(value):
    assert Priority.from_json(value) is Priority.LOW


@pytest.mark.parametrize("value", ["finished", 1, None])
def test_unknown_status_falls_back_to_todo(value):
    assert Status.from_json(value) is Status.TODO


def test_default_task_serialises_zero_times():
    data = Task().to_dict()
    assert data["created_at"] == "0001-01-01T00:00:00Z"
    assert data["due_date"] == data["updated_at"] == data["created_at"]
    assert data["priority"] == "low"
    assert data["status"] == "todo"
    assert data["id"] == ""


def test_round_trip_preserves_task():
    offset = timezone(timedelta(hours=-5, minutes=-30))
    task = Task(
        id="abc",
        title="Write report",
        description="quarterly",
        priority=Priority.HIGH,
        status=Status.IN_PROGRESS,
        created_at=datetime(2024, 3, 1, 9, 0, 0, 250000, tzinfo=timezone.utc),
        updated_at=datetime(2024, 3, 2, 10, 0, 0, tzinfo=offset),
        due_date=datetime(2030, 1, 1, tzinfo=timezone.utc),
    )
    assert Task.from_dict(task.to_dict()) == task


def test_utc_time_serialised_with_z_suffix():
    moment = datetime(2030, 1, 1, 12, 30, tzinfo=timezone.utc)
    text = Task(due_date=moment).to_dict()["due_date"]
    assert text.endswith("Z")
    assert Task.from_dict({"due_date": text}).due_date == moment


def test_parses_nanosecond_fraction_and_offset():
    task = Task.from_dict({"due_date": "2030-05-06T07:08:09.123456789+02:00"})
    assert task.due_date.microsecond == 123456
    assert task.due_date.utcoffset() == timedelta(hours=2)


def test_missing_and_null_fields_take_defaults():
    task = Task.from_dict({"title": "x", "description": None, "due_date": None})
    assert task == Task(title="x")
    assert task.due_date == ZERO_TIME


@pytest.mark.parametrize(
    "data",
    [
        [],
        "task",
        {"title": 5},
        {"description": ["a"]},
        {"due_date": "tomorrow"},
        {"due_date": 12},
        {"due_date": "2030-13-01T00:00:00Z"},
    ],
)
def test_from_dict_rejects_malformed_input(data):
    with pytest.raises(ValueError):
        Task.from_dict(data)