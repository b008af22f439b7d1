"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import logging
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import DatabaseError
from django.db.models import Count, Q

from brands.domain.brand import UNKNOWN_BRAND, BrandSummary
from core.domain.exceptions import CatalogStoreError
from products.domain.product import Product
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Translates database errors into CatalogStoreError
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=model.price,
            brand=model.brand,
            image=model.image,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, product: Product) -> ProductModel:
        """
        Convert domain entity to Django model.

        Args:
            product: Product domain entity

        Returns:
            Django Product model (existing row or a new instance)
        """
        # pylint: disable=no-member
        model = ProductModel.objects.filter(id=product.id).first()
        if model is None:
            model = ProductModel(id=product.id)
        model.name = product.name
        model.description = product.description
        model.price = product.price
        model.brand = product.brand
        model.image = product.image
        return model

    @sync_to_async
    def save(self, product: Product) -> Product:
        """
        Save a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity
        """
        try:
            model = self._to_model(product)
            model.save()
        except DatabaseError as e:
            logger.error("Failed to save product %s", product.id, exc_info=True)
            raise CatalogStoreError() from e
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            Product entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = ProductModel.objects.get(id=product_id)
        except ProductModel.DoesNotExist:  # pylint: disable=no-member
            return None
        except DatabaseError as e:
            logger.error("Failed to load product %s", product_id, exc_info=True)
            raise CatalogStoreError() from e
        return self._to_domain(model)

    @sync_to_async
    def list_all(self, brand: Optional[str] = None) -> List[Product]:
        """
        List products, newest first.

        Args:
            brand: Only return products with exactly this brand.
                "Unknown" also matches products with a blank brand.

        Returns:
            List of Product entities
        """
        # pylint: disable=no-member
        qs = ProductModel.objects.all()
        if brand == UNKNOWN_BRAND:
            qs = qs.filter(Q(brand="") | Q(brand=UNKNOWN_BRAND))
        elif brand is not None:
            qs = qs.filter(brand=brand)
        try:
            return [self._to_domain(model) for model in qs]
        except DatabaseError as e:
            logger.error("Failed to list products", exc_info=True)
            raise CatalogStoreError() from e

    @sync_to_async
    def delete(self, product_id: uuid.UUID) -> bool:
        """
        Delete a product by ID.

        Args:
            product_id: Product UUID

        Returns:
            True if a product was deleted
        """
        try:
            # pylint: disable=no-member
            deleted, _ = ProductModel.objects.filter(id=product_id).delete()
        except DatabaseError as e:
            logger.error("Failed to delete product %s", product_id, exc_info=True)
            raise CatalogStoreError() from e
        return deleted > 0

    @sync_to_async
    def brand_counts(self) -> List[BrandSummary]:
        """
        Group products by brand, sorted by brand name.

        Blank brands are counted in the "Unknown" group.

        Returns:
            List of BrandSummary
        """
        # pylint: disable=no-member
        qs = (
            ProductModel.objects.order_by()
            .values("brand")
            .annotate(count=Count("id"))
        )
        try:
            counts = {}
            for row in qs:
                name = row["brand"] or UNKNOWN_BRAND
                counts[name] = counts.get(name, 0) + row["count"]
            return [BrandSummary(name=name, count=count) for name, count in sorted(counts.items())]
        except DatabaseError as e:
            logger.error("Failed to group products by brand", exc_info=True)
            raise CatalogStoreError() from e
