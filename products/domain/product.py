"""
Product domain entity.

This is the core domain entity representing a catalog product.
It is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.utils import timezone


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Represents a product shown in the catalog. Fields are free text;
    only the name is required.
    """

    id: uuid.UUID
    name: str
    description: str
    price: Decimal
    brand: str
    image: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate product entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Product name too long")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: Decimal,
        brand: str,
        image: str,
        product_id: Optional[uuid.UUID] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            name: Product display name
            description: Free text description
            price: Product price
            brand: Brand name as typed by the user
            image: Stored image file name or path
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance
        """
        now = timezone.now()
        return cls(
            id=product_id or uuid.uuid4(),
            name=name.strip(),
            description=description or "",
            price=Decimal(price),
            brand=(brand or "").strip(),
            image=image,
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        name: str,
        description: str,
        price: Decimal,
        brand: str,
        image: Optional[str] = None,
    ) -> "Product":
        """
        Create a new Product instance with edited fields.

        The image is only replaced when a new one is given.

        Returns:
            New Product instance
        """
        return replace(
            self,
            name=name.strip(),
            description=description or "",
            price=Decimal(price),
            brand=(brand or "").strip(),
            image=image or self.image,
            updated_at=timezone.now(),
        )
