"""
File-system implementation of the ImageStorage port.

Uploaded images are written under MEDIA_ROOT with a timestamp-based
name and served from MEDIA_URL.
"""

import logging
import os
import time
from typing import Optional

from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import UploadedFile

from core.domain.exceptions import ImageUploadError
from products.ports.image_storage import ImageStorage

logger = logging.getLogger(__name__)


def generate_image_name(original_name: str, now: Optional[float] = None) -> str:
    """
    Build the stored name for an upload.

    The name is the epoch time in milliseconds followed by the
    original file extension, e.g. ``1718031234567.png``.
    """
    timestamp = int((time.time() if now is None else now) * 1000)
    _, ext = os.path.splitext(original_name or "")
    return f"{timestamp}{ext.lower()}"


class FileSystemImageStorage(ImageStorage):
    """Store product images on the local file system."""

    def __init__(self, location: Optional[str] = None, base_url: Optional[str] = None):
        """
        Initialize storage.

        Args:
            location: Directory for stored images (defaults to MEDIA_ROOT)
            base_url: URL prefix for stored images (defaults to MEDIA_URL)
        """
        # None defers to MEDIA_ROOT / MEDIA_URL, read lazily by Django
        self.storage = FileSystemStorage(location=location, base_url=base_url)

    def save(self, uploaded_file: UploadedFile) -> str:
        """
        Store an uploaded image.

        Args:
            uploaded_file: File received with the request

        Returns:
            Stored file name
        """
        name = generate_image_name(uploaded_file.name)
        try:
            stored_name = self.storage.save(name, uploaded_file)
        except OSError as e:
            logger.error("Upload error: could not store %s", uploaded_file.name, exc_info=True)
            raise ImageUploadError() from e
        logger.info(
            "Stored product image",
            extra={"original_name": uploaded_file.name, "stored_name": stored_name},
        )
        return stored_name

    def url(self, name: str) -> str:
        """
        Return the public URL of a stored image.

        Absolute paths and remote URLs are returned unchanged.
        """
        if not name:
            return ""
        if name.startswith(("/", "http://", "https://")):
            return name
        return self.storage.url(name)

