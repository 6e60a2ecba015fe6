"""Ownership checks shared by the task and note services.

Every call is authorized on its own; nothing is cached between calls.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session
from tasknotes.errors import Unauthenticated, NotFound, Forbidden
from tasknotes.models import Task

logger = logging.getLogger(__name__)

# ids are signed 64-bit integers in the database
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def lookup(db: Session, model, ident: int):
    """``db.get`` that treats ids outside the 64-bit range as missing."""
    if not MIN_ID <= ident <= MAX_ID:
        return None
    return db.get(model, ident)


def require_user(user_id: Optional[int]) -> int:
    if user_id is None:
        raise Unauthenticated()
    return user_id


def get_owned_task(db: Session, user_id: Optional[int], task_id: int) -> Task:
    """Return the task if ``user_id`` owns it; raise otherwise."""
    user_id = require_user(user_id)
    task = lookup(db, Task, task_id)
    if task is None:
        raise NotFound("Task not found")
    if task.owner_id != user_id:
        logger.warning("user %s denied access to task %s", user_id, task_id)
        raise Forbidden()
    return task


def find_owned_task(db: Session, user_id: Optional[int], task_id: int) -> Optional[Task]:
    """Soft variant of get_owned_task for read paths: None instead of an error."""
    if user_id is None:
        return None
    task = lookup(db, Task, task_id)
    if task is None or task.owner_id != user_id:
        return None
    return task
