"""
Product DTOs for views and API responses.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class ProductDTO:
    """DTO for product information."""

    id: uuid.UUID
    name: str
    description: str
    price: Decimal
    brand: str
    image: str
    image_url: str
    brand_logo: str
    created_at: datetime
    updated_at: datetime
