# taskmanager

A small task manager library: a task model with JSON conversion, field
validation, a thread-safe in-memory store, and a service that ties them
together.

## Installing

```
pip install .
```

## The task model

`taskmanager.domain.Task` is a dataclass with the fields `id`, `title`,
`description`, `priority`, `status`, `created_at`, `updated_at` and
`due_date`.

- `Priority` is `LOW`, `MEDIUM` or `HIGH`; `str()` gives `low`, `medium`,
  `high`.
- `Status` is `TODO`, `IN_PROGRESS` or `DONE`; `str()` gives `todo`,
  `in_progress`, `done`.
- `Priority.from_json` and `Status.from_json` read those strings; any other
  value becomes `LOW` or `TODO`.
- `Task.to_dict()` returns a JSON-ready dictionary with times written in
  RFC 3339 form (for example `2030-01-01T09:00:00Z`).
- `Task.from_dict(data)` builds a task from decoded JSON. Missing fields take
  their defaults; a field of the wrong type or a badly formed time raises
  `ValueError`.

`TaskRepository`, `TaskService`, `TaskValidator` and `TaskNotifier` in the
same module are protocols describing the pieces below.

## Validation

`taskmanager.validator.DefaultTaskValidator.validate_task(task)` raises a
`ValidationError` (a `ValueError`) for the first problem it finds:

- `Title: cannot be empty`
- `Title: exceeds maximum length` when the title is longer than 100 bytes in
  UTF-8
- `DueDate: must be a future date` when the due date lies in the past

`BaseValidator` lets you register your own rules per attribute with
`add_rule(field, rule)`; `validate(value)` returns every error found. The
rules `NotEmptyRule`, `MaxLengthRule` and `FutureDateRule` are available for
reuse.

## Storage

`taskmanager.repository.MemoryTaskRepository` keeps tasks in memory.
`create` assigns a fresh UUID and the creation and update times; `get_by_id`,
`update` and `delete` raise `LookupError("task not found")` for an unknown
id; `list` returns all stored tasks.

## The service

```python
from datetime import datetime, timedelta, timezone

from taskmanager.domain import Priority, Status
from taskmanager.repository import MemoryTaskRepository
from taskmanager.service import TaskManager
from taskmanager.validator import DefaultTaskValidator


class PrintNotifier:
    def notify_task_created(self, task):
        print("Task created:", task.title)

    def notify_task_completed(self, task):
        print("Task completed:", task.title)

    def notify_task_due_soon(self, task):
        print("Task due soon:", task.title)


manager = TaskManager(MemoryTaskRepository(), DefaultTaskValidator(), PrintNotifier())
task = manager.create_task(
    "Write report",
    "Quarterly summary",
    Priority.HIGH,
    datetime.now(timezone.utc) + timedelta(days=7),
)
manager.update_task_status(task.id, Status.IN_PROGRESS)
print([t.to_dict() for t in manager.list_tasks()])
```

`TaskManager.create_task` validates the task, stores it with status `TODO`
and calls the notifier's `notify_task_created`. The other methods are
`update_task_status`, `update_task_priority`, `get_task`, `list_tasks` and
`delete_task`.

## What this package does not do

It has no HTTP server, no command-line program and no notifier of its own:
you supply a notifier object, and serving tasks over the network is left to
the application that uses the library. Tasks are kept only in memory and are
lost when the process ends.

## Tests

```
pip install .[test]
pytest
```