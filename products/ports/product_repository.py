"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from brands.domain.brand import BrandSummary
from products.domain.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """
        Create or update a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self, brand: Optional[str] = None) -> List[Product]:
        """
        List products.

        Args:
            brand: Only return products with exactly this brand

        Returns:
            List of Product entities
        """
        pass

    @abstractmethod
    async def delete(self, product_id: uuid.UUID) -> bool:
        """
        Delete a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            True if a product was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def brand_counts(self) -> List[BrandSummary]:
        """
        Group products by brand.

        Returns:
            One BrandSummary per distinct brand, sorted by brand name
        """
        pass
