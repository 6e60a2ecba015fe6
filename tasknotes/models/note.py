from datetime import datetime, UTC

from sqlalchemy import Column, Integer, ForeignKey, Text
from tasknotes.database import Base, UTCDateTime


class Note(Base):
    """Free-text note attached to a task. Ownership is the parent task's owner."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True)
    task_id = Column(Integer, ForeignKey("tasks.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=lambda: datetime.now(UTC))
