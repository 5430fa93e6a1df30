# /app/core/deps.py

"""
Request-scoped FastAPI dependencies.

Authentication: `get_optional_user_id` answers "who is calling, if anyone";
protected routes depend on `get_current_user_id`, which turns an absent or
invalid token into a 401.

Providers: each generator is built from a fresh `ProviderSettings`, so tests
can swap credentials (or whole clients) with `app.dependency_overrides`.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.core import security
from app.core.config import ProviderSettings, get_provider_settings
from app.db.models.user_models import User as UserModel
from app.services.database_service import DatabaseService, get_db_service
from app.services.blog_service import BlogGenerator
from app.services.cloudinary_service import CloudinaryUploader
from app.services.gemini_service import GeminiImageClient
from app.services.groq_service import GroqClient
from app.services.image_service import ImageGenerator
from app.services.script_service import ScriptGenerator
from app.services.trending_service import TrendingService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


# --- Authentication ---

def get_optional_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    if not token:
        return None
    return security.decode_access_token(token)


def get_current_user_id(user_id: Optional[str] = Depends(get_optional_user_id)) -> str:
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


def get_current_active_user(
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service),
) -> UserModel:
    user = db.get_user_by_id(user_id)
    if not user:
        # Token outlived its account.
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# --- Provider clients ---

def get_text_client(settings: ProviderSettings = Depends(get_provider_settings)) -> GroqClient:
    return GroqClient.from_settings(settings)


def get_image_client(settings: ProviderSettings = Depends(get_provider_settings)) -> GeminiImageClient:
    return GeminiImageClient.from_settings(settings)


def get_uploader(settings: ProviderSettings = Depends(get_provider_settings)) -> CloudinaryUploader:
    return CloudinaryUploader.from_settings(settings)


# --- Generators ---

def get_trending_service(
    settings: ProviderSettings = Depends(get_provider_settings),
    text_client: GroqClient = Depends(get_text_client),
) -> TrendingService:
    return TrendingService(settings, text_client)


def get_script_generator(text_client: GroqClient = Depends(get_text_client)) -> ScriptGenerator:
    return ScriptGenerator(text_client)


def get_image_generator(
    image_client: GeminiImageClient = Depends(get_image_client),
    uploader: CloudinaryUploader = Depends(get_uploader),
) -> ImageGenerator:
    return ImageGenerator(image_client, uploader)


def get_blog_generator(
    text_client: GroqClient = Depends(get_text_client),
    image_client: GeminiImageClient = Depends(get_image_client),
) -> BlogGenerator:
    return BlogGenerator(text_client, image_client)
