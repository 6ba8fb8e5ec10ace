"""Task model, validation, in-memory storage and task service logic."""

__version__ = "0.1.0"