"""
Pytest configuration and shared fixtures.
"""

import base64
import uuid
from decimal import Decimal
from typing import Dict, List, Optional

import pytest
from asgiref.sync import async_to_sync
from django.core.files.uploadedfile import SimpleUploadedFile

from brands.application.services.logo_service import BrandLogoService, get_brand_logo_service
from brands.domain.brand import UNKNOWN_BRAND, BrandSummary
from brands.domain.logo_resolver import BrandLogoResolver
from products.domain.product import Product
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from products.ports.image_storage import ImageStorage
from products.ports.product_repository import ProductRepository

PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

LOGO_TABLE = {
    "samsung": "https://logos.example/samsung.jpg",
    "apple": "https://logos.example/apple.png",
    "oppo": "https://logos.example/oppo.png",
    "oneplus": "https://logos.example/oneplus.jpg",
    "google": "https://logos.example/google.png",
}


class InMemoryProductRepository(ProductRepository):
    """ProductRepository keeping products in a dict."""

    def __init__(self):
        self.products: Dict[uuid.UUID, Product] = {}

    async def save(self, product: Product) -> Product:
        self.products[product.id] = product
        return product

    async def find_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        return self.products.get(product_id)

    async def list_all(self, brand: Optional[str] = None) -> List[Product]:
        products = sorted(self.products.values(), key=lambda p: p.created_at, reverse=True)
        if brand == UNKNOWN_BRAND:
            products = [p for p in products if p.brand in ("", UNKNOWN_BRAND)]
        elif brand is not None:
            products = [p for p in products if p.brand == brand]
        return products

    async def delete(self, product_id: uuid.UUID) -> bool:
        return self.products.pop(product_id, None) is not None

    async def brand_counts(self) -> List[BrandSummary]:
        counts: Dict[str, int] = {}
        for product in self.products.values():
            name = product.brand or UNKNOWN_BRAND
            counts[name] = counts.get(name, 0) + 1
        return [BrandSummary(name=name, count=count) for name, count in sorted(counts.items())]


class FakeImageStorage(ImageStorage):
    """ImageStorage recording saved files without touching disk."""

    def __init__(self):
        self.saved: List[str] = []

    def save(self, uploaded_file) -> str:
        name = f"{len(self.saved) + 1}-{uploaded_file.name}"
        self.saved.append(name)
        return name

    def url(self, name: str) -> str:
        return f"/images/{name}" if name else ""


@pytest.fixture(autouse=True)
def reset_logo_service():
    """Rebuild the logo service for every test so settings overrides apply."""
    get_brand_logo_service.cache_clear()
    yield
    get_brand_logo_service.cache_clear()


@pytest.fixture
def media_root(settings, tmp_path):
    """Point MEDIA_ROOT at a per-test directory."""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path


@pytest.fixture
def logo_resolver():
    """Fixture for a resolver over a small logo table."""
    return BrandLogoResolver(LOGO_TABLE)


@pytest.fixture
def logo_service(logo_resolver):
    """Fixture for BrandLogoService."""
    return BrandLogoService(logo_resolver)


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def memory_repository():
    """Fixture for the in-memory ProductRepository."""
    return InMemoryProductRepository()


@pytest.fixture
def image_storage():
    """Fixture for the fake ImageStorage."""
    return FakeImageStorage()


@pytest.fixture
def image_file():
    """Factory for uploaded PNG files."""

    def make(name="phone.png"):
        return SimpleUploadedFile(name, PNG_BYTES, content_type="image/png")

    return make


@pytest.fixture
def sample_product():
    """Fixture for a sample Product entity."""
    return Product.create(
        name="Galaxy S24",
        description="Flagship phone",
        price=Decimal("799.99"),
        brand="Samsung",
        image="1718031234567.png",
    )


@pytest.fixture
def db_product(db, product_repository, sample_product):
    """Fixture for a Product saved in database."""
    return async_to_sync(product_repository.save)(sample_product)


@pytest.fixture
def db_products(db, product_repository):
    """Fixture for several saved products across brands."""
    products = [
        Product.create(name="Galaxy S24", description="", price=Decimal("799"),
                       brand="Samsung", image="1.png"),
        Product.create(name="Galaxy A55", description="", price=Decimal("399"),
                       brand="Samsung", image="2.png"),
        Product.create(name="Pixel 9", description="", price=Decimal("699"),
                       brand="Google Pixel", image="3.png"),
        Product.create(name="Phone 2", description="", price=Decimal("499"),
                       brand="Nothing", image="4.png"),
    ]
    return [async_to_sync(product_repository.save)(p) for p in products]


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
