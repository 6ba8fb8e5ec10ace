"""Thread-safe in-memory task storage."""

from __future__ import annotations

import threading
import uuid
from datetime import datetime


def _now():
    return datetime.now().astimezone()


class MemoryTaskRepository:
    """Keeps tasks in a dictionary keyed by id."""

    def __init__(self):
        self._tasks = {}
        self._lock = threading.RLock()

    def create(self, task):
        """Assign an id and timestamps to the task and store it."""
        with self._lock:
            task.id = str(uuid.uuid4())
            now = _now()
            task.created_at = now
            task.updated_at = now
            self._tasks[task.id] = task

    def delete(self, task_id):
        """Remove a task; raises LookupError if it does not exist."""
        with self._lock:
            if task_id not in self._tasks:
                raise LookupError("task not found")
            del self._tasks[task_id]

    def get_by_id(self, task_id):
        """Return the stored task; raises LookupError if it does not exist."""
        with self._lock:
            try:
                return self._tasks[task_id]
            except KeyError:
                raise LookupError("task not found") from None

    def update(self, task):
        """Copy the editable fields onto the stored task with the same id."""
        with self._lock:
            existing = self._tasks.get(task.id)
            if existing is None:
                raise LookupError("task not found")
            existing.title = task.title
            existing.description = task.description
            existing.priority = task.priority
            existing.status = task.status
            existing.due_date = task.due_date
            existing.updated_at = _now()

    def list(self):
        """Return all stored tasks."""
        with self._lock:
            return list(self._tasks.values())