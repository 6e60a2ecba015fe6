from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from tasknotes.database import get_db
from tasknotes.models import Priority
from tasknotes.schemas.task import TaskCreate, TaskUpdate, TaskOut, CreatedOut
from tasknotes.services import tasks as task_service
from tasknotes.services.filtering import StatusFilter, SortKey, filter_and_sort
from tasknotes.utils.auth import current_user_id

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/", response_model=list[TaskOut])
def list_tasks(
    status: StatusFilter = StatusFilter.ALL,
    priority: Optional[Priority] = None,
    sort: SortKey = SortKey.CREATED,
    q: Optional[str] = Query(None, description="Search by title"),
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(current_user_id),
):
    """Caller's tasks, newest first unless ``sort`` says otherwise.

    Anonymous callers get an empty list, not an error.
    """
    tasks = task_service.list_tasks(db, user_id)
    return filter_and_sort(tasks, status=status, priority=priority, sort=sort, q=q)


@router.post("/", response_model=CreatedOut)
def create_task(task: TaskCreate, db: Session = Depends(get_db), user_id: Optional[int] = Depends(current_user_id)):
    task_id = task_service.create_task(db, user_id, task.title, task.priority, task.due_date)
    return {"id": task_id}


@router.patch("/{task_id}")
def update_task(task_id: int, patch: TaskUpdate, db: Session = Depends(get_db),
                user_id: Optional[int] = Depends(current_user_id)):
    task_service.update_task(db, user_id, task_id, patch.changes())
    return {"detail": "updated"}


@router.delete("/{task_id}")
def delete_task(task_id: int, db: Session = Depends(get_db), user_id: Optional[int] = Depends(current_user_id)):
    task_service.remove_task(db, user_id, task_id)
    return {"detail": "deleted"}
