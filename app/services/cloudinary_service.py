# /app/services/cloudinary_service.py

import asyncio
from typing import Optional

import cloudinary.uploader

from app.core.config import ProviderSettings
from app.core.exceptions import ConfigurationError, UpstreamProviderError


class CloudinaryUploader:
    """Uploads base64 images to Cloudinary and hands back the durable HTTPS URL."""

    def __init__(
        self,
        cloud_name: Optional[str],
        api_key: Optional[str],
        api_secret: Optional[str],
        folder: str,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder

    @classmethod
    def from_settings(cls, settings: ProviderSettings) -> "CloudinaryUploader":
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            folder=settings.cloudinary_folder,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def _upload(self, data_uri: str) -> dict:
        # Credentials go per call rather than through cloudinary.config(),
        # which is process-global.
        return cloudinary.uploader.upload(
            data_uri,
            folder=self.folder,
            resource_type="image",
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
        )

    async def upload_base64(self, base64_data: str, mime_type: str) -> str:
        if not self.is_configured:
            raise ConfigurationError("Cloudinary credentials are not configured")

        data_uri = f"data:{mime_type};base64,{base64_data}"
        try:
            result = await asyncio.to_thread(self._upload, data_uri)
        except Exception as e:
            print(f"ERROR in Cloudinary upload: {e}")
            raise UpstreamProviderError("Failed to upload image to Cloudinary") from e

        secure_url = (result or {}).get("secure_url")
        if not secure_url:
            raise UpstreamProviderError("Failed to upload image to Cloudinary")
        return secure_url
