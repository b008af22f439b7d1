"""
Product CRUD handlers.

Handlers for create, update, delete, get and list product operations.
"""

import logging
from typing import List

from asgiref.sync import sync_to_async

from brands.application.services.logo_service import BrandLogoService
from core.domain.exceptions import ProductNotFoundError
from core.metrics import products_created_total, products_deleted_total, products_updated_total
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.dto.product_dto import ProductDTO
from products.application.queries.get_product import GetProductQuery
from products.application.queries.list_products import ListProductsQuery
from products.domain.product import Product
from products.ports.image_storage import ImageStorage
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductPresenter:
    """Turns Product entities into DTOs with display URLs."""

    def __init__(self, image_storage: ImageStorage, logo_service: BrandLogoService):
        """Initialize presenter with storage and logo service."""
        self.image_storage = image_storage
        self.logo_service = logo_service

    def to_dto(self, product: Product) -> ProductDTO:
        """
        Convert a Product entity to a ProductDTO.

        Args:
            product: Product entity

        Returns:
            ProductDTO with image URL and resolved brand logo
        """
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            brand=product.brand,
            image=product.image,
            image_url=self.image_storage.url(product.image),
            brand_logo=self.logo_service.logo_for(product.brand),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class CreateProductHandler:
    """Handler for CreateProductCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        image_storage: ImageStorage,
        logo_service: BrandLogoService,
    ):
        """Initialize handler with repository and storage."""
        self.product_repository = product_repository
        self.image_storage = image_storage
        self.logo_service = logo_service
        self.presenter = ProductPresenter(image_storage, logo_service)

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand

        Returns:
            ProductDTO of the created product

        Raises:
            ImageUploadError: If the image cannot be stored
            CatalogStoreError: If the product cannot be saved
        """
        image_name = await sync_to_async(self.image_storage.save)(command.image)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            brand=command.brand,
            image=image_name,
        )
        saved = await self.product_repository.save(product)

        logo_match = self.logo_service.resolve(saved.brand).match
        products_created_total.labels(logo_match=logo_match.value).inc()
        logger.info(
            "Product created",
            extra={"product_id": str(saved.id), "brand": saved.brand, "image": image_name},
        )
        return self.presenter.to_dto(saved)


class UpdateProductHandler:
    """Handler for UpdateProductCommand."""

    def __init__(
        self,
        product_repository: ProductRepository,
        image_storage: ImageStorage,
        logo_service: BrandLogoService,
    ):
        """Initialize handler with repository and storage."""
        self.product_repository = product_repository
        self.image_storage = image_storage
        self.presenter = ProductPresenter(image_storage, logo_service)

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """
        Handle update product command.

        Args:
            command: UpdateProductCommand

        Returns:
            ProductDTO of the updated product

        Raises:
            ProductNotFoundError: If product not found
        """
        product = await self.product_repository.find_by_id(command.product_id)
        if not product:
            raise ProductNotFoundError(f"Product {command.product_id} not found")

        image_name = None
        if command.image is not None:
            image_name = await sync_to_async(self.image_storage.save)(command.image)

        updated = product.update(
            name=command.name,
            description=command.description,
            price=command.price,
            brand=command.brand,
            image=image_name,
        )
        saved = await self.product_repository.save(updated)

        products_updated_total.labels(image_replaced=str(image_name is not None).lower()).inc()
        logger.info(
            "Product updated",
            extra={"product_id": str(saved.id), "image_replaced": image_name is not None},
        )
        return self.presenter.to_dto(saved)


class DeleteProductHandler:
    """Handler for DeleteProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: DeleteProductCommand) -> None:
        """
        Handle delete product command.

        The stored image file is left in place.

        Raises:
            ProductNotFoundError: If product not found
        """
        deleted = await self.product_repository.delete(command.product_id)
        if not deleted:
            raise ProductNotFoundError(f"Product {command.product_id} not found")

        products_deleted_total.inc()
        logger.info("Product deleted", extra={"product_id": str(command.product_id)})


class GetProductHandler:
    """Handler for GetProductQuery."""

    def __init__(
        self,
        product_repository: ProductRepository,
        image_storage: ImageStorage,
        logo_service: BrandLogoService,
    ):
        """Initialize handler with repository and storage."""
        self.product_repository = product_repository
        self.presenter = ProductPresenter(image_storage, logo_service)

    async def handle(self, query: GetProductQuery) -> ProductDTO:
        """
        Handle get product query.

        Raises:
            ProductNotFoundError: If product not found
        """
        product = await self.product_repository.find_by_id(query.product_id)
        if not product:
            raise ProductNotFoundError(f"Product {query.product_id} not found")
        return self.presenter.to_dto(product)


class ListProductsHandler:
    """Handler for ListProductsQuery."""

    def __init__(
        self,
        product_repository: ProductRepository,
        image_storage: ImageStorage,
        logo_service: BrandLogoService,
    ):
        """Initialize handler with repository and storage."""
        self.product_repository = product_repository
        self.presenter = ProductPresenter(image_storage, logo_service)

    async def handle(self, query: ListProductsQuery) -> List[ProductDTO]:
        """
        Handle list products query.

        Args:
            query: ListProductsQuery

        Returns:
            List of ProductDTO
        """
        products = await self.product_repository.list_all(brand=query.brand)
        return [self.presenter.to_dto(product) for product in products]
