import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session
from tasknotes.errors import InvalidUpdate
from tasknotes.models import Task, Note, Priority
from tasknotes.services.authz import require_user, get_owned_task

logger = logging.getLogger(__name__)


def list_tasks(db: Session, user_id: Optional[int]) -> list[Task]:
    """Tasks owned by ``user_id``, newest first. Anonymous callers get []."""
    if user_id is None:
        logger.debug("anonymous task list, returning empty")
        return []
    return (
        db.query(Task)
        .filter(Task.owner_id == user_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
        .all()
    )


def create_task(db: Session, user_id: Optional[int], title: str, priority: Priority,
                due_date: Optional[datetime] = None) -> int:
    # title is taken as sent; trimming and emptiness are the client's call
    user_id = require_user(user_id)
    task = Task(
        owner_id=user_id,
        title=title,
        completed=False,
        priority=Priority(priority),
        due_date=due_date,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("user %s created task %s", user_id, task.id)
    return task.id


def update_task(db: Session, user_id: Optional[int], task_id: int, changes: dict) -> None:
    """Apply only the fields present in ``changes``; absent fields keep their value."""
    task = get_owned_task(db, user_id, task_id)
    unknown = set(changes) - set(Task.EDITABLE)
    if unknown:
        raise InvalidUpdate(f"cannot update fields: {', '.join(sorted(unknown))}")
    for field, value in changes.items():
        if field == "priority":
            value = Priority(value)
        setattr(task, field, value)
    db.commit()
    logger.info("user %s updated task %s fields=%s", user_id, task_id, sorted(changes))


def remove_task(db: Session, user_id: Optional[int], task_id: int) -> None:
    """Delete the task and its notes in one transaction, notes first."""
    task = get_owned_task(db, user_id, task_id)
    try:
        removed = (
            db.query(Note)
            .filter(Note.task_id == task.id)
            .delete(synchronize_session=False)
        )
        db.delete(task)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("failed to delete task %s", task_id)
        raise
    logger.info("user %s deleted task %s with %d notes", user_id, task_id, removed)
