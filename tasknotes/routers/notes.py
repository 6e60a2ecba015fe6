from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tasknotes.database import get_db
from tasknotes.schemas.note import NoteCreate, NoteOut
from tasknotes.schemas.task import CreatedOut
from tasknotes.services import notes as note_service
from tasknotes.utils.auth import current_user_id

router = APIRouter(tags=["notes"])


@router.get("/tasks/{task_id}/notes", response_model=list[NoteOut])
def list_notes(task_id: int, db: Session = Depends(get_db), user_id: Optional[int] = Depends(current_user_id)):
    return note_service.list_notes(db, user_id, task_id)


@router.post("/tasks/{task_id}/notes", response_model=CreatedOut)
def create_note(task_id: int, note: NoteCreate, db: Session = Depends(get_db),
                user_id: Optional[int] = Depends(current_user_id)):
    return {"id": note_service.create_note(db, user_id, task_id, note.content)}


@router.delete("/notes/{note_id}")
def delete_note(note_id: int, db: Session = Depends(get_db), user_id: Optional[int] = Depends(current_user_id)):
    note_service.remove_note(db, user_id, note_id)
    return {"detail": "deleted"}
