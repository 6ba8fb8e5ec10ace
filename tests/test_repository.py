import uuid

import pytest

from taskmanager.domain import Priority, Status, Task
from taskmanager.repository import MemoryTaskRepository


@pytest.fixture
def repo():
    return MemoryTaskRepository()


def test_create_assigns_id_and_timestamps(repo):
    task = Task(title="a")
    repo.create(task)
    assert str(uuid.UUID(task.id)) == task.id
    assert task.created_at == task.updated_at
    assert task.created_at.tzinfo is not None
    assert repo.get_by_id(task.id) is task


def test_ids_are_unique(repo):
    tasks = [Task(title=str(n)) for n in range(5)]
    for task in tasks:
        repo.create(task)
    assert len({task.id for task in tasks}) == 5


def test_get_missing_raises(repo):
    with pytest.raises(LookupError, match="task not found"):
        repo.get_by_id("nope")


def test_update_copies_fields(repo):
    task = Task(title="old")
    repo.create(task)
    created = task.created_at
    change = Task(id=task.id, title="new", description="d", priority=Priority.HIGH, status=Status.DONE)
    repo.update(change)
    stored = repo.get_by_id(task.id)
    assert (stored.title, stored.description) == ("new", "d")
    assert stored.priority is Priority.HIGH
    assert stored.status is Status.DONE
    assert stored.created_at == created
    assert stored.updated_at >= created


def test_update_missing_raises(repo):
    with pytest.raises(LookupError, match="task not found"):
        repo.update(Task(id="nope"))


def test_delete(repo):
    task = Task(title="a")
    repo.create(task)
    repo.delete(task.id)
    with pytest.raises(LookupError):
        repo.get_by_id(task.id)
    with pytest.raises(LookupError, match="task not found"):
        repo.delete(task.id)


def test_list(repo):
    assert repo.list() == []
    first, second = Task(title="1"), Task(title="2")
    repo.create(first)
    repo.create(second)
    assert sorted(t.id for t in repo.list()) == sorted([first.id, second.id])