"""
UpdateProductCommand.

Command to edit a product in place.
"""

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.core.files.uploadedfile import UploadedFile


@dataclass
class UpdateProductCommand:
    """
    Command to update a product.

    The stored image is only replaced when ``image`` is given.
    """

    product_id: uuid.UUID
    name: str
    description: str
    price: Decimal
    brand: str
    image: Optional[UploadedFile] = None
