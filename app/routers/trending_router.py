# /app/routers/trending_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..core.deps import get_trending_service
from ..core.exceptions import NotFoundError, UpstreamProviderError
from ..models.response_model import ApiResponse
from ..models.topic_model import TrendingTopic
from ..services.trending_service import TrendingService

router = APIRouter()


@router.get(
    "",  # Maps to /api/trending
    response_model=ApiResponse[List[TrendingTopic]],
    summary="Get Trending Topics",
    description="Fetches up to 8 trending topics; every topic is guaranteed a description.",
)
async def get_trending_topics(
    response: Response,
    service: TrendingService = Depends(get_trending_service),
):
    try:
        topics = await service.get_trending_topics()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UpstreamProviderError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except Exception as e:
        print(f"ERROR at /api/trending: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching trending topics",
        )

    # Lets clients and proxies reuse the list for the feed's revalidation window.
    response.headers["Cache-Control"] = f"public, max-age={service.settings.trends_revalidate_seconds}"
    return ApiResponse(success=True, message="Trending topics fetched successfully", data=topics)
