from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from tasknotes.models.task import Priority


class TaskCreate(BaseModel):
    # title is stored as sent; an empty string is accepted
    title: str
    priority: Priority = Priority.MEDIUM
    due_date: Optional[datetime] = None


class TaskUpdate(BaseModel):
    """Patch body: only the fields present in the request are applied.

    ``due_date: null`` clears the due date; the other fields cannot be nulled.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None

    @field_validator("title", "completed", "priority")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    completed: bool
    priority: Priority
    due_date: Optional[datetime] = None
    created_at: datetime


class CreatedOut(BaseModel):
    id: int
