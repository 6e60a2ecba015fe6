"""ORM models exposed by the tasknotes application."""
from .user import User
from .task import Task, Priority
from .note import Note

__all__ = ["User", "Task", "Priority", "Note"]
