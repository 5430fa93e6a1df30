# /app/services/history_service.py

import uuid
from typing import Dict, Any, List, Optional

from app.core.exceptions import InvalidInputError, NotFoundError, OwnershipError
from app.db.models.generation_models import Generation, GenerationType
from app.models.generation_model import (
    GenerationDetail,
    GenerationRecord,
    GenerationSaveRequest,
    HistoryItem,
    SavedGeneration,
)
from .database_service import DatabaseService


def _new_generation_id() -> str:
    return f"gen_{uuid.uuid4().hex[:16]}"


def create_generation(
    db: DatabaseService,
    user_id: str,
    topic_id: str,
    generation_type: GenerationType,
    content: Optional[str] = None,
    image_data: Optional[str] = None,
    image_mime: Optional[str] = None,
) -> Generation:
    """Persists one generation. Rows are write-once; there is no update path."""
    record: Dict[str, Any] = {
        "id": _new_generation_id(),
        "type": generation_type,
        "content": content or None,
        "image_data": image_data or None,
        "image_mime": image_mime or None,
        "topic_id": topic_id,
        "user_id": user_id,
    }
    return db.add_generation_record(record)


def save_generation(db: DatabaseService, user_id: str, payload: GenerationSaveRequest) -> SavedGeneration:
    """
    Backs POST /api/generations/save. The topic must already exist (it is
    saved first through /api/topics/save).
    """
    if not payload.type or not payload.topicId:
        raise InvalidInputError("Type and topicId are required")
    if not db.get_topic_by_id(payload.topicId):
        raise NotFoundError("Topic not found")

    generation = create_generation(
        db,
        user_id=user_id,
        topic_id=payload.topicId,
        generation_type=payload.type,
        content=payload.content,
        image_data=payload.imageData,
        image_mime=payload.imageMime,
    )
    record = GenerationRecord.model_validate(generation)
    return SavedGeneration.model_validate({**record.model_dump(), "generationId": record.id})


def get_history(db: DatabaseService, user_id: str) -> List[HistoryItem]:
    """The requesting user's generations, newest first, each with its topic summary."""
    processed_records = []
    for record_obj in db.get_generations_by_user_id(user_id):
        try:
            processed_records.append(HistoryItem.model_validate(record_obj))
        except Exception as e:
            print(f"Skipping corrupted history record: {getattr(record_obj, 'id', 'N/A')}. Error: {e}")
            continue
    return processed_records


def _get_owned_generation(db: DatabaseService, user_id: str, generation_id: str) -> Generation:
    generation = db.get_generation_by_id(generation_id)
    if not generation:
        raise NotFoundError("Generation not found")
    if generation.user_id != user_id:
        raise OwnershipError("Forbidden")
    return generation


def get_generation(db: DatabaseService, user_id: str, generation_id: str) -> GenerationDetail:
    generation = _get_owned_generation(db, user_id, generation_id)
    return GenerationDetail.model_validate(generation)


def delete_generation(db: DatabaseService, user_id: str, generation_id: str) -> bool:
    _get_owned_generation(db, user_id, generation_id)
    return db.delete_generation_record(generation_id)
