# /app/routers/generate_router.py

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import (
    get_blog_generator,
    get_current_user_id,
    get_image_generator,
    get_script_generator,
)
from ..core.exceptions import ConfigurationError, InvalidInputError, UpstreamProviderError
from ..models.generation_model import BlogResult, GenerateRequest, ImageResult, ScriptResult
from ..models.response_model import ApiResponse
from ..services import blog_service
from ..services.blog_service import BlogGenerator
from ..services.database_service import DatabaseService, get_db_service
from ..services.image_service import ImageGenerator
from ..services.script_service import ScriptGenerator

router = APIRouter()


def _raise_http_error(e: Exception, log_context: str, server_error_message: str) -> NoReturn:
    """Maps the service error taxonomy onto HTTP status codes."""
    if isinstance(e, InvalidInputError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if isinstance(e, ConfigurationError):
        print(f"ERROR at {log_context}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if isinstance(e, UpstreamProviderError):
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    print(f"ERROR at {log_context}: {e}")
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=server_error_message)


@router.post(
    "/script",
    response_model=ApiResponse[ScriptResult],
    summary="Generate a Video Script",
    description="Writes a sectioned video script for a topic, with word count and speaking-time estimate.",
)
async def generate_script(
    request: GenerateRequest,
    generator: ScriptGenerator = Depends(get_script_generator),
):
    try:
        result = await generator.generate(request.topicTitle, request.topicDescription)
    except Exception as e:
        _raise_http_error(e, "/api/generate/script", "Server error while generating script")
    return ApiResponse(success=True, message="Script generated successfully", data=result)


@router.post(
    "/image",
    response_model=ApiResponse[ImageResult],
    summary="Generate a Thumbnail Image",
    description="Generates a thumbnail with Gemini, uploads it to Cloudinary, and returns the hosted URL.",
)
async def generate_image(
    request: GenerateRequest,
    generator: ImageGenerator = Depends(get_image_generator),
):
    try:
        result = await generator.generate(request.topicTitle, request.topicDescription)
    except Exception as e:
        _raise_http_error(e, "/api/generate/image", "Server error while generating image")
    return ApiResponse(success=True, message="Image generated and uploaded successfully", data=result)


@router.post(
    "/blog",
    response_model=ApiResponse[BlogResult],
    summary="Generate and Save a Blog Post",
    description="Generates the article and its featured image in parallel, converts it to HTML, and saves it to history.",
)
async def generate_blog(
    request: GenerateRequest,
    user_id: str = Depends(get_current_user_id),
    generator: BlogGenerator = Depends(get_blog_generator),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        result = await blog_service.generate_and_save_blog(
            db=db,
            user_id=user_id,
            generator=generator,
            topic_title=request.topicTitle,
            topic_description=request.topicDescription,
        )
    except Exception as e:
        _raise_http_error(e, "/api/generate/blog", "Server error while generating blog")
    return ApiResponse(success=True, message="Blog generated and saved successfully", data=result)
