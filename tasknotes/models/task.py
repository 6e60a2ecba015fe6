import enum
from datetime import datetime, UTC

from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, Enum
from tasknotes.database import Base, UTCDateTime


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    # owner never changes after insert; services only patch the editable fields
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    priority = Column(
        Enum(Priority, native_enum=False, length=6, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=Priority.MEDIUM,
    )
    due_date = Column(UTCDateTime, nullable=True)
    created_at = Column(UTCDateTime, nullable=False, default=lambda: datetime.now(UTC))

    # fields a patch may touch
    EDITABLE = ("title", "completed", "priority", "due_date")
