# /app/services/image_service.py

from typing import Optional

from app.core.exceptions import ConfigurationError, InvalidInputError
from app.models.generation_model import ImageResult
from . import prompt_library
from .cloudinary_service import CloudinaryUploader
from .gemini_service import GeminiImageClient


class ImageGenerator:
    """
    Thumbnail generation: Gemini draws the image, Cloudinary stores it, and
    only the hosted URL goes back to the caller.
    """

    def __init__(self, image_client: GeminiImageClient, uploader: CloudinaryUploader):
        self.image_client = image_client
        self.uploader = uploader

    async def generate(self, topic_title: Optional[str], topic_description: Optional[str] = None) -> ImageResult:
        if not topic_title or not topic_title.strip():
            raise InvalidInputError("Topic title is required")

        prompt = prompt_library.THUMBNAIL_IMAGE_PROMPT.format(
            topic_title=topic_title.strip(),
            topic_context=topic_description or prompt_library.DEFAULT_TOPIC_CONTEXT,
        )
        if not self.uploader.is_configured:
            # Checked up front so an image that cannot be stored is never generated.
            raise ConfigurationError("Cloudinary credentials are not configured")

        image = await self.image_client.generate_image(prompt)
        image_url = await self.uploader.upload_base64(image.data, image.mime_type)

        return ImageResult(imageUrl=image_url, imageMime=image.mime_type)
