# /app/routers/topics_router.py

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..core.deps import get_current_user_id
from ..core.exceptions import InvalidInputError
from ..models.response_model import ApiResponse
from ..models.topic_model import SavedTopic, TopicSaveRequest
from ..services import topic_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post(
    "/save",
    response_model=ApiResponse[SavedTopic],
    status_code=status.HTTP_201_CREATED,
    summary="Save a Topic",
    description="Stores a topic, or returns the existing one (200) when a topic with the same title is already saved.",
)
def save_topic(
    payload: TopicSaveRequest,
    response: Response,
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        topic, created = topic_service.save_topic(db, payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        print(f"ERROR at /api/topics/save: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while saving topic",
        )

    if not created:
        response.status_code = status.HTTP_200_OK
        return ApiResponse(success=True, message="Topic already exists", data=topic)
    return ApiResponse(success=True, message="Topic saved successfully", data=topic)
