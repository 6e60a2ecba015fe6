"""Filtering and sorting of a user's task list.

Works on already-loaded tasks (the list the owner is allowed to see), so it
never touches the database.
"""
import enum
from typing import Iterable, Optional

from tasknotes.models import Task, Priority


class StatusFilter(str, enum.Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class SortKey(str, enum.Enum):
    CREATED = "created"
    PRIORITY = "priority"
    DUE_DATE = "due_date"


PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


def _newest_first(task):
    return (task.created_at, task.id)


def _due_key(task):
    # tasks without a due date go last
    if task.due_date is None:
        return (1, 0)
    return (0, task.due_date.timestamp())


def filter_and_sort(tasks: Iterable[Task], status=StatusFilter.ALL, priority: Optional[Priority] = None,
                    sort=SortKey.CREATED, q: Optional[str] = None) -> list[Task]:
    status = StatusFilter(status)
    sort = SortKey(sort)

    result = list(tasks)
    if status is StatusFilter.ACTIVE:
        result = [t for t in result if not t.completed]
    elif status is StatusFilter.COMPLETED:
        result = [t for t in result if t.completed]

    if priority is not None:
        priority = Priority(priority)
        result = [t for t in result if t.priority == priority]

    if q:
        needle = q.lower()
        result = [t for t in result if needle in (t.title or "").lower()]

    # newest first is the base order; the other keys sort stably on top of it
    result.sort(key=_newest_first, reverse=True)
    if sort is SortKey.PRIORITY:
        result.sort(key=lambda t: PRIORITY_RANK[t.priority])
    elif sort is SortKey.DUE_DATE:
        result.sort(key=_due_key)
    return result
