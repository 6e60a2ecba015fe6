import logging
from typing import Optional

from sqlalchemy.orm import Session
from tasknotes.errors import NotFound, Forbidden
from tasknotes.models import Task, Note
from tasknotes.services.authz import require_user, get_owned_task, find_owned_task, lookup

logger = logging.getLogger(__name__)


def list_notes(db: Session, user_id: Optional[int], task_id: int) -> list[Note]:
    """Notes of a task, oldest first.

    Reads fail softly: an anonymous caller, a missing task or someone else's
    task all give an empty list rather than an error.
    """
    task = find_owned_task(db, user_id, task_id)
    if task is None:
        logger.debug("note list for task %s unavailable to user %s", task_id, user_id)
        return []
    return (
        db.query(Note)
        .filter(Note.task_id == task.id)
        .order_by(Note.created_at.asc(), Note.id.asc())
        .all()
    )


def create_note(db: Session, user_id: Optional[int], task_id: int, content: str) -> int:
    task = get_owned_task(db, user_id, task_id)
    note = Note(task_id=task.id, content=content)
    db.add(note)
    db.commit()
    db.refresh(note)
    logger.info("user %s added note %s to task %s", user_id, note.id, task_id)
    return note.id


def remove_note(db: Session, user_id: Optional[int], note_id: int) -> None:
    user_id = require_user(user_id)
    note = lookup(db, Note, note_id)
    if note is None:
        raise NotFound("Note not found")
    # a note whose task is gone is treated like one the caller does not own
    task = db.get(Task, note.task_id)
    if task is None or task.owner_id != user_id:
        logger.warning("user %s denied access to note %s", user_id, note_id)
        raise Forbidden()
    db.delete(note)
    db.commit()
    logger.info("user %s deleted note %s", user_id, note_id)
