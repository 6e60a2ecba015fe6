from datetime import datetime, UTC

from sqlalchemy import Column, Integer, String
from tasknotes.database import Base, UTCDateTime


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=lambda: datetime.now(UTC))
