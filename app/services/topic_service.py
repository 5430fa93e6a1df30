# /app/services/topic_service.py

import uuid
from typing import Optional, Tuple

from app.core.exceptions import InvalidInputError
from app.db.models.topic_models import Topic
from app.models.topic_model import SavedTopic, TopicSaveRequest
from .database_service import DatabaseService


def _new_topic_id() -> str:
    return f"top_{uuid.uuid4().hex[:16]}"


def find_or_create_topic(
    db: DatabaseService,
    title: str,
    description: str = "",
    image_url: Optional[str] = None,
    traffic: Optional[str] = None,
    source: Optional[str] = None,
) -> Tuple[Topic, bool]:
    """
    Returns (topic, created). Lookup is by exact title. There is no lock
    around the lookup and insert, so two concurrent first saves of the same
    title can both create a row; that duplicate is tolerated.
    """
    existing = db.get_topic_by_title(title)
    if existing:
        return existing, False

    new_topic = db.add_topic({
        "id": _new_topic_id(),
        "title": title,
        "description": description or "",
        "image_url": image_url or None,
        "traffic": traffic or None,
        "source": source or None,
    })
    return new_topic, True


def save_topic(db: DatabaseService, payload: TopicSaveRequest) -> Tuple[SavedTopic, bool]:
    if not payload.title or not payload.description:
        raise InvalidInputError("Title and description are required")

    topic, created = find_or_create_topic(
        db,
        title=payload.title,
        description=payload.description,
        image_url=payload.imageUrl,
        traffic=payload.traffic,
        source=payload.source,
    )
    saved = SavedTopic.model_validate({
        "id": topic.id,
        "topicId": topic.id,
        "title": topic.title,
        "description": topic.description,
        "imageUrl": topic.image_url,
        "traffic": topic.traffic,
        "source": topic.source,
        "createdAt": topic.created_at,
    })
    return saved, created
