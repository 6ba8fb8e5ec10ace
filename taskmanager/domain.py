"""Task model, its enumerations, and the interfaces of the task components."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Any, Protocol

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


class Priority(IntEnum):
    """How urgent a task is."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_json(cls, value):
        """Decode a JSON value; anything unrecognised becomes LOW."""
        if isinstance(value, str):
            for member in cls:
                if str(member) == value:
                    return member
        return cls.LOW


class Status(IntEnum):
    """Where a task stands in its life cycle."""

    TODO = 0
    IN_PROGRESS = 1
    DONE = 2

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_json(cls, value):
        """Decode a JSON value; anything unrecognised becomes TODO."""
        if isinstance(value, str):
            for member in cls:
                if str(member) == value:
                    return member
        return cls.TODO


def _format_time(moment: datetime) -> str:
    offset = moment.utcoffset() or timedelta(0)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    total = abs(total)
    return f"{text}{sign}{total // 3600:02d}:{total % 3600 // 60:02d}"


def _parse_time(text: str) -> datetime:
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid time {text!r}: expected RFC 3339 format")
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    microsecond = int(((match.group(7) or "") + "000000")[:6])
    zone = match.group(8)
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)


def _str_field(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _time_field(data: dict, key: str) -> datetime:
    value = data.get(key)
    if value is None:
        return ZERO_TIME
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be an RFC 3339 time string")
    return _parse_time(value)


@dataclass
class Task:
    """A unit of work with its metadata."""

    id: str = ""
    title: str = ""
    description: str = ""
    priority: Priority = Priority.LOW
    status: Status = Status.TODO
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    due_date: datetime = ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        """Return the task as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "priority": str(self.priority),
            "status": str(self.status),
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
            "due_date": _format_time(self.due_date),
        }

    @classmethod
    def from_dict(cls, data) -> Task:
        """Build a task from decoded JSON; raises ValueError on malformed input."""
        if not isinstance(data, dict):
            raise ValueError("task must be a JSON object")
        return cls(
            id=_str_field(data, "id"),
            title=_str_field(data, "title"),
            description=_str_field(data, "description"),
            priority=Priority.from_json(data.get("priority")),
            status=Status.from_json(data.get("status")),
            created_at=_time_field(data, "created_at"),
            updated_at=_time_field(data, "updated_at"),
            due_date=_time_field(data, "due_date"),
        )


class TaskRepository(Protocol):
    """Storage for tasks."""

    def create(self, task):
        """Store a new task, assigning its id and timestamps."""

    def get_by_id(self, task_id):
        """Return the task with the given id or raise LookupError."""

    def update(self, task):
        """Overwrite the stored task that has the same id."""

    def delete(self, task_id):
        """Remove the task with the given id."""

    def list(self):
        """Return all stored tasks."""


class TaskService(Protocol):
    """Business operations on tasks."""

    def create_task(self, title, description, priority, due_date):
        """Validate, store and announce a new task."""

    def update_task_status(self, task_id, status):
        """Change the status of a task."""

    def update_task_priority(self, task_id, priority):
        """Change the priority of a task."""

    def get_task(self, task_id):
        """Return one task."""

    def list_tasks(self):
        """Return all tasks."""

    def delete_task(self, task_id):
        """Remove a task."""


class TaskValidator(Protocol):
    """Checks a task before it is stored."""

    def validate_task(self, task):
        """Raise an error if the task is invalid."""


class TaskNotifier(Protocol):
    """Receives task events."""

    def notify_task_created(self, task):
        """Called after a task was created."""

    def notify_task_completed(self, task):
        """Called after a task was completed."""

    def notify_task_due_soon(self, task):
        """Called when a task is due soon."""