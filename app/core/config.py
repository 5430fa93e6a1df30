# /app/core/config.py

"""
Runtime configuration for the external providers the generators talk to.

Credentials are read from the process environment (and a local `.env` file,
via python-dotenv) every time `ProviderSettings.from_env()` is called. The
resulting struct is handed to each generator at construction time, so a
missing credential surfaces as a `ConfigurationError` from the generator that
needs it rather than as a crash at import time.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from .exceptions import ConfigurationError

load_dotenv()

DEFAULT_GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"
DEFAULT_GEMINI_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_TRENDS_RSS_URL = "https://trends.google.com/trending/rss?geo=IN"
DEFAULT_CLOUDINARY_FOLDER = "trendforge"


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


class ProviderSettings(BaseModel):
    # --- Text completion (Groq, OpenAI-compatible) ---
    groq_api_key: Optional[str] = None
    groq_api_url: str = DEFAULT_GROQ_API_URL
    groq_model: str = DEFAULT_GROQ_MODEL

    # --- Image generation (Gemini) ---
    gemini_api_key: Optional[str] = None
    gemini_image_model: str = DEFAULT_GEMINI_IMAGE_MODEL

    # --- Image hosting (Cloudinary) ---
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None
    cloudinary_folder: str = DEFAULT_CLOUDINARY_FOLDER

    # --- Trending feed ---
    trends_rss_url: str = DEFAULT_TRENDS_RSS_URL
    trends_revalidate_seconds: int = 600

    @property
    def text_provider_configured(self) -> bool:
        return bool(self.groq_api_key)

    @property
    def image_provider_configured(self) -> bool:
        return bool(self.gemini_api_key)

    @property
    def hosting_provider_configured(self) -> bool:
        return bool(self.cloudinary_cloud_name and self.cloudinary_api_key and self.cloudinary_api_secret)

    @classmethod
    def from_env(cls) -> "ProviderSettings":
        return cls(
            groq_api_key=_env("GROQ_API_KEY"),
            groq_api_url=_env("GROQ_API_URL") or DEFAULT_GROQ_API_URL,
            groq_model=_env("GROQ_MODEL") or DEFAULT_GROQ_MODEL,
            gemini_api_key=_env("GEMINI_API_KEY"),
            gemini_image_model=_env("GEMINI_IMAGE_MODEL") or DEFAULT_GEMINI_IMAGE_MODEL,
            cloudinary_cloud_name=_env("CLOUDINARY_CLOUD_NAME"),
            cloudinary_api_key=_env("CLOUDINARY_API_KEY"),
            cloudinary_api_secret=_env("CLOUDINARY_API_SECRET"),
            cloudinary_folder=_env("CLOUDINARY_FOLDER") or DEFAULT_CLOUDINARY_FOLDER,
            trends_rss_url=_env("TRENDS_RSS_URL") or DEFAULT_TRENDS_RSS_URL,
            trends_revalidate_seconds=int(_env("TRENDS_REVALIDATE_SECONDS") or 600),
        )


def get_provider_settings() -> ProviderSettings:
    """FastAPI dependency. Rebuilt per request so env changes are picked up."""
    return ProviderSettings.from_env()


# --- Auth settings ---
JWT_ALGORITHM = "HS256"
# Thirty days, the same lifetime as the web session cookie.
JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", str(30 * 24 * 60)))


def get_jwt_secret() -> str:
    """
    The key every access token is signed and verified with. There is no
    fallback: a missing or blank JWT_SECRET is a ConfigurationError.
    """
    secret = _env("JWT_SECRET")
    if not secret:
        raise ConfigurationError("JWT_SECRET is not defined in environment variables")
    return secret
