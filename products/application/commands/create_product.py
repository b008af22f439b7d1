"""
CreateProductCommand.

Command to create a product from the creation form.
"""

from dataclasses import dataclass
from decimal import Decimal

from django.core.files.uploadedfile import UploadedFile


@dataclass
class CreateProductCommand:
    """Command to create a product with an uploaded image."""

    name: str
    description: str
    price: Decimal
    brand: str
    image: UploadedFile
