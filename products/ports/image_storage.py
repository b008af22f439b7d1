"""
Image storage port (interface).

Receives uploaded product images and turns stored names into URLs.
"""

from abc import ABC, abstractmethod

from django.core.files.uploadedfile import UploadedFile


class ImageStorage(ABC):
    """Abstract storage for uploaded product images."""

    @abstractmethod
    def save(self, uploaded_file: UploadedFile) -> str:
        """
        Store an uploaded image.

        Args:
            uploaded_file: File received with the request

        Returns:
            Generated file name of the stored image
        """
        pass

    @abstractmethod
    def url(self, name: str) -> str:
        """
        Return the public URL of a stored image.

        Args:
            name: Stored file name, or an absolute path / URL

        Returns:
            URL usable as an image ``src``
        """
        pass
