"""Generic field validation and the rules used to check tasks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone


class ValidationError(ValueError):
    """A field that failed a validation rule."""

    def __init__(self, field, message):
        super().__init__(field, message)
        self.field = field
        self.message = message

    def __str__(self):
        return f"{self.field}: {self.message}"


@dataclass
class NotEmptyRule:
    """Rejects empty strings."""

    field: str

    def validate(self, value):
        if isinstance(value, str) and value == "":
            raise ValidationError(self.field, "cannot be empty")


@dataclass
class MaxLengthRule:
    """Rejects strings longer than max_length bytes in UTF-8."""

    field: str
    max_length: int

    def validate(self, value):
        if isinstance(value, str) and len(value.encode("utf-8")) > self.max_length:
            raise ValidationError(self.field, "exceeds maximum length")


@dataclass
class FutureDateRule:
    """Rejects dates that lie in the past."""

    field: str

    def validate(self, value):
        if not isinstance(value, datetime):
            return
        now = datetime.now(timezone.utc) if value.tzinfo else datetime.now()
        if value < now:
            raise ValidationError(self.field, "must be a future date")


def _lookup(target, name):
    if isinstance(target, Mapping):
        return target.get(name)
    return getattr(target, name, None)


class BaseValidator:
    """Applies rules registered per attribute and collects their errors."""

    def __init__(self):
        self._rules = {}

    def add_rule(self, field, rule):
        """Register a rule for the attribute or key called field."""
        self._rules.setdefault(field, []).append(rule)

    def validate(self, value):
        """Return the list of ValidationErrors raised by all rules, in order."""
        errors = []
        for field, rules in self._rules.items():
            item = _lookup(value, field)
            for rule in rules:
                try:
                    rule.validate(item)
                except ValidationError as error:
                    errors.append(error)
        return errors


class DefaultTaskValidator(BaseValidator):
    """Checks a task's title and due date."""

    def __init__(self):
        super().__init__()
        self.add_rule("title", NotEmptyRule("Title"))
        self.add_rule("title", MaxLengthRule("Title", 100))
        self.add_rule("due_date", FutureDateRule("DueDate"))

    def validate_task(self, task):
        """Raise the first validation error found in the task."""
        errors = self.validate(task)
        if errors:
            raise errors[0]