# /app/services/gemini_service.py

import base64
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional

from google import genai
from google.genai import types

from app.core.config import ProviderSettings
from app.core.exceptions import ConfigurationError, UpstreamProviderError

DEFAULT_IMAGE_MIME = "image/png"


@lru_cache(maxsize=None)
def _shared_client(api_key: str) -> genai.Client:
    # One SDK client per key for the life of the process.
    return genai.Client(api_key=api_key)


@dataclass
class InlineImage:
    data: str  # base64
    mime_type: str


def extract_inline_image(parts: Optional[Iterable]) -> Optional[InlineImage]:
    """
    Returns the first content part carrying inline binary data, base64-encoded.
    Text parts (the model may narrate alongside the image) are ignored.
    """
    for part in parts or []:
        inline = getattr(part, "inline_data", None)
        if inline is None or not inline.data:
            continue
        raw = inline.data
        if isinstance(raw, (bytes, bytearray)):
            encoded = base64.b64encode(raw).decode("ascii")
        else:
            # Already base64 text.
            encoded = str(raw)
        return InlineImage(data=encoded, mime_type=inline.mime_type or DEFAULT_IMAGE_MIME)
    return None


class GeminiImageClient:
    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model

    @classmethod
    def from_settings(cls, settings: ProviderSettings) -> "GeminiImageClient":
        return cls(api_key=settings.gemini_api_key, model=settings.gemini_image_model)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> genai.Client:
        return _shared_client(self.api_key)

    async def generate_image(self, prompt: str) -> InlineImage:
        """The workhorse for image requests: one prompt in, one inline image out."""
        if not self.is_configured:
            raise ConfigurationError("Gemini API key is not configured")

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
            )
        except Exception as e:
            print(f"ERROR in generate_image with Gemini API: {e}")
            raise UpstreamProviderError("Failed to generate image via Gemini") from e

        parts = []
        if response.candidates and response.candidates[0].content:
            parts = response.candidates[0].content.parts or []

        image = extract_inline_image(parts)
        if image is None:
            raise UpstreamProviderError("Gemini did not return an image")
        return image
