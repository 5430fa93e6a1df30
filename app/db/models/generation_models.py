# /app/db/models/generation_models.py

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..base_class import Base


class GenerationType(str, enum.Enum):
    SCRIPT = "SCRIPT"
    IMAGE = "IMAGE"
    BLOG = "BLOG"


def _utcnow():
    return datetime.now(timezone.utc)


class Generation(Base):
    id = Column(String, primary_key=True, index=True)
    type = Column(Enum(GenerationType, name="generation_type"), nullable=False)
    # Free text for SCRIPT/IMAGE, a JSON document for BLOG.
    content = Column(Text, nullable=True)
    image_data = Column(Text, nullable=True)  # base64
    image_mime = Column(String, nullable=True)
    topic_id = Column(String, ForeignKey("topics.id"), index=True, nullable=False)
    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=False)
    # Python-side default keeps sub-second ordering on SQLite.
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())

    topic = relationship("Topic", back_populates="generations")
    user = relationship("User", back_populates="generations")
