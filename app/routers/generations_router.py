# /app/routers/generations_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_current_user_id
from ..core.exceptions import InvalidInputError, NotFoundError, OwnershipError
from ..models.generation_model import GenerationDetail, GenerationSaveRequest, HistoryItem, SavedGeneration
from ..models.response_model import ApiResponse
from ..services import history_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post(
    "/save",
    response_model=ApiResponse[SavedGeneration],
    status_code=status.HTTP_201_CREATED,
    summary="Save a Generation",
)
def save_generation(
    payload: GenerationSaveRequest,
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service),
):
    """Persists a script or image the user chose to keep."""
    try:
        generation = history_service.save_generation(db, user_id, payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        print(f"ERROR at /api/generations/save: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while saving generation",
        )
    return ApiResponse(success=True, message="Generation saved successfully", data=generation)


@router.get(
    "/history",
    response_model=ApiResponse[List[HistoryItem]],
    summary="Get Generation History",
)
def get_history(
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service),
):
    """The current user's generations, newest first."""
    try:
        history = history_service.get_history(db, user_id)
    except Exception as e:
        print(f"ERROR at /api/generations/history: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching history",
        )
    return ApiResponse(success=True, message="History fetched successfully", data=history)


@router.get(
    "/{generation_id}",
    response_model=ApiResponse[GenerationDetail],
    summary="Get a Single Generation",
    responses={403: {"description": "Generation belongs to another user"}, 404: {"description": "Generation not found"}},
)
def get_generation(
    generation_id: str,
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        generation = history_service.get_generation(db, user_id, generation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except OwnershipError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception as e:
        print(f"ERROR at GET /api/generations/{generation_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")
    return ApiResponse(success=True, message="Generation fetched successfully", data=generation)


@router.delete(
    "/{generation_id}",
    response_model=ApiResponse[None],
    summary="Delete a Generation",
    description="Permanently deletes one generation from the current user's history.",
    responses={403: {"description": "Generation belongs to another user"}, 404: {"description": "Generation not found"}},
)
def delete_generation(
    generation_id: str,
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        history_service.delete_generation(db, user_id, generation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except OwnershipError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception as e:
        print(f"ERROR at DELETE /api/generations/{generation_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")
    return ApiResponse(success=True, message="Generation deleted successfully")
