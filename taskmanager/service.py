"""Task business logic on top of a repository, validator and notifier."""

from __future__ import annotations

from .domain import Status, Task


class TaskManager:
    """Implements the task service operations."""

    def __init__(self, repo, validator, notifier):
        self.repo = repo
        self.validator = validator
        self.notifier = notifier

    def create_task(self, title, description, priority, due_date):
        """Validate and store a new task, then announce it."""
        task = Task(
            title=title,
            description=description,
            priority=priority,
            status=Status.TODO,
            due_date=due_date,
        )
        self.validator.validate_task(task)
        self.repo.create(task)
        self.notifier.notify_task_created(task)
        return task

    def update_task_status(self, task_id, status):
        """Set a task's status."""
        task = self.repo.get_by_id(task_id)
        task.status = status
        self.repo.update(task)

    def update_task_priority(self, task_id, priority):
        """Set a task's priority."""
        task = self.repo.get_by_id(task_id)
        task.priority = priority
        self.repo.update(task)

    def get_task(self, task_id):
        """Return one task."""
        return self.repo.get_by_id(task_id)

    def list_tasks(self):
        """Return all tasks."""
        return self.repo.list()

    def delete_task(self, task_id):
        """Remove a task."""
        self.repo.delete(task_id)