# /app/db/models/topic_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..base_class import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Topic(Base):
    id = Column(String, primary_key=True, index=True)
    # Looked up by exact title but not unique: concurrent first saves of the
    # same title may both insert.
    title = Column(String, index=True, nullable=False)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String, nullable=True)
    traffic = Column(String, nullable=True)
    source = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())

    generations = relationship("Generation", back_populates="topic")
