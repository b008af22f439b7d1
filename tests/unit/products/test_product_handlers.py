"""
Unit tests for product CRUD handlers.
"""

import threading
import uuid
from decimal import Decimal

import pytest
from prometheus_client import REGISTRY

from brands.domain.logo_resolver import LogoMatch
from core.domain.exceptions import ProductNotFoundError
from core.metrics import products_created_total
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    GetProductHandler,
    ListProductsHandler,
    UpdateProductHandler,
)
from products.application.queries.get_product import GetProductQuery
from products.application.queries.list_products import ListProductsQuery


@pytest.fixture
def create_handler(memory_repository, image_storage, logo_service):
    return CreateProductHandler(memory_repository, image_storage, logo_service)


@pytest.fixture
def update_handler(memory_repository, image_storage, logo_service):
    return UpdateProductHandler(memory_repository, image_storage, logo_service)


async def _create(handler, image_file, name="Galaxy S24", brand="Samsung"):
    return await handler.handle(
        CreateProductCommand(
            name=name,
            description="Flagship phone",
            price=Decimal("799.99"),
            brand=brand,
            image=image_file(),
        )
    )


@pytest.mark.asyncio
class TestCreateProductHandler:
    """Tests for CreateProductHandler."""

    async def test_create(self, create_handler, memory_repository, image_storage, image_file):
        result = await _create(create_handler, image_file)

        assert result.name == "Galaxy S24"
        assert result.image == "1-phone.png"
        assert result.image_url == "/images/1-phone.png"
        assert result.brand_logo == "https://logos.example/samsung.jpg"
        assert image_storage.saved == ["1-phone.png"]
        assert result.id in memory_repository.products

    async def test_create_unknown_brand_gets_fallback_logo(self, create_handler, image_file):
        result = await _create(create_handler, image_file, brand="Nokia")
        assert result.brand_logo == "/images/nokia.png"


@pytest.mark.asyncio
class TestUpdateProductHandler:
    """Tests for UpdateProductHandler."""

    async def test_update_without_image_keeps_image(
        self, create_handler, update_handler, image_storage, image_file
    ):
        created = await _create(create_handler, image_file)

        result = await update_handler.handle(
            UpdateProductCommand(
                product_id=created.id,
                name="Galaxy S24 Ultra",
                description="Bigger",
                price=Decimal("1199.00"),
                brand="Samsung",
            )
        )

        assert result.name == "Galaxy S24 Ultra"
        assert result.price == Decimal("1199.00")
        assert result.image == created.image
        assert image_storage.saved == ["1-phone.png"]

    async def test_update_with_image_replaces_it(
        self, create_handler, update_handler, image_storage, image_file
    ):
        created = await _create(create_handler, image_file)

        result = await update_handler.handle(
            UpdateProductCommand(
                product_id=created.id,
                name=created.name,
                description=created.description,
                price=created.price,
                brand="Google Pixel",
                image=image_file("new.jpg"),
            )
        )

        assert result.image == "2-new.jpg"
        assert result.brand_logo == "https://logos.example/google.png"

    async def test_update_missing_product(self, update_handler):
        with pytest.raises(ProductNotFoundError):
            await update_handler.handle(
                UpdateProductCommand(
                    product_id=uuid.uuid4(),
                    name="x",
                    description="",
                    price=Decimal("1"),
                    brand="",
                )
            )


@pytest.mark.asyncio
class TestDeleteProductHandler:
    """Tests for DeleteProductHandler."""

    async def test_delete(self, create_handler, memory_repository, image_file):
        created = await _create(create_handler, image_file)

        await DeleteProductHandler(memory_repository).handle(
            DeleteProductCommand(product_id=created.id)
        )

        assert memory_repository.products == {}

    async def test_delete_missing_product(self, memory_repository):
        with pytest.raises(ProductNotFoundError):
            await DeleteProductHandler(memory_repository).handle(
                DeleteProductCommand(product_id=uuid.uuid4())
            )


@pytest.mark.asyncio
class TestProductQueries:
    """Tests for GetProductHandler and ListProductsHandler."""

    async def test_get(self, create_handler, memory_repository, image_storage, logo_service, image_file):
        created = await _create(create_handler, image_file)

        handler = GetProductHandler(memory_repository, image_storage, logo_service)
        result = await handler.handle(GetProductQuery(product_id=created.id))

        assert result == created

    async def test_get_missing(self, memory_repository, image_storage, logo_service):
        handler = GetProductHandler(memory_repository, image_storage, logo_service)
        with pytest.raises(ProductNotFoundError):
            await handler.handle(GetProductQuery(product_id=uuid.uuid4()))

    async def test_list_filters_by_exact_brand(
        self, create_handler, memory_repository, image_storage, logo_service, image_file
    ):
        await _create(create_handler, image_file, name="Galaxy S24", brand="Samsung")
        await _create(create_handler, image_file, name="Pixel 9", brand="Google Pixel")

        handler = ListProductsHandler(memory_repository, image_storage, logo_service)

        assert len(await handler.handle(ListProductsQuery())) == 2
        samsung = await handler.handle(ListProductsQuery(brand="Samsung"))
        assert [p.name for p in samsung] == ["Galaxy S24"]
        assert await handler.handle(ListProductsQuery(brand="samsung")) == []


@pytest.mark.asyncio
class TestProductHandlerSideEffects:
    """Metrics and threading behaviour of the write handlers."""

    async def test_created_metric_labelled_by_logo_match(self, create_handler, image_file):
        before = REGISTRY.get_sample_value("products_created_total", {"logo_match": "fallback"}) or 0.0

        for index in range(3):
            await _create(create_handler, image_file, brand=f"free-text-{index}")

        after = REGISTRY.get_sample_value("products_created_total", {"logo_match": "fallback"})
        assert after == before + 3

        tiers = {match.value for match in LogoMatch}
        for metric in products_created_total.collect():
            for sample in metric.samples:
                assert set(sample.labels) == {"logo_match"}
                assert sample.labels["logo_match"] in tiers

    async def test_image_saved_off_the_event_loop_thread(self, create_handler, image_storage, image_file):
        threads = []
        save = image_storage.save

        def recording_save(uploaded_file):
            threads.append(threading.get_ident())
            return save(uploaded_file)

        image_storage.save = recording_save
        await _create(create_handler, image_file)

        assert threads
        assert threads[0] != threading.get_ident()
