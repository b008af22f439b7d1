"""
Integration tests for storefront pages.
"""

import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from asgiref.sync import async_to_sync
from django.urls import reverse
from django.utils.html import escape

from brands.domain.logos import DEFAULT_BRAND_LOGOS
from core.domain.exceptions import CatalogStoreError, ImageUploadError
from products.domain.product import Product as ProductEntity
from products.infrastructure.models import Product
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from products.infrastructure.storage.file_system_image_storage import FileSystemImageStorage


@pytest.mark.django_db
@pytest.mark.integration
class TestBrowsePages:
    """Tests for the read-only catalog pages."""

    def test_home_lists_brands_with_logos(self, client, db_products):
        response = client.get(reverse("storefront:home"))

        assert response.status_code == 200
        brands = response.context["brands"]
        assert [(b.name, b.count) for b in brands] == [
            ("Google Pixel", 1),
            ("Nothing", 1),
            ("Samsung", 2),
        ]
        assert escape(DEFAULT_BRAND_LOGOS["google"]) in response.content.decode()

    def test_home_empty(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "No products yet" in response.content.decode()

    def test_brand_page(self, client, db_products):
        response = client.get(reverse("storefront:brand", args=["Google Pixel"]))

        assert response.status_code == 200
        assert response.context["brand"] == "Google Pixel"
        assert response.context["brand_logo"] == DEFAULT_BRAND_LOGOS["google"]
        assert [p.name for p in response.context["products"]] == ["Pixel 9"]

    def test_brand_page_is_exact_match(self, client, db_products):
        response = client.get("/brand/samsung")

        assert response.status_code == 200
        assert list(response.context["products"]) == []

    def test_unknown_brand_card_lists_blank_brand_products(self, client, product_repository):
        async_to_sync(product_repository.save)(
            ProductEntity.create(name="Mystery", description="", price=Decimal("1"), brand="", image="")
        )

        home = client.get("/")
        assert [b.name for b in home.context["brands"]] == ["Unknown"]
        assert f'href="{reverse("storefront:brand", args=["Unknown"])}"' in home.content.decode()

        response = client.get(reverse("storefront:brand", args=["Unknown"]))
        assert [p.name for p in response.context["products"]] == ["Mystery"]

    def test_brand_page_without_name_lists_all(self, client, db_products):
        response = client.get("/brand")

        assert response.status_code == 200
        assert response.context["brand"] is None
        assert len(response.context["products"]) == 4

    def test_brand_directory(self, client, db_products):
        response = client.get(reverse("storefront:brands"))

        assert response.status_code == 200
        assert len(response.context["brands"]) == 3

    def test_read_lists_products(self, client, db_products):
        response = client.get(reverse("storefront:read"))

        assert response.status_code == 200
        assert "Galaxy A55" in response.content.decode()

    def test_product_detail(self, client, db_product):
        response = client.get(reverse("storefront:product-detail", args=[db_product.id]))

        assert response.status_code == 200
        product = response.context["product"]
        assert product.brand_logo == DEFAULT_BRAND_LOGOS["samsung"]
        assert product.image_url == "/images/1718031234567.png"

    def test_product_detail_missing(self, client):
        response = client.get(reverse("storefront:product-detail", args=[uuid.uuid4()]))
        assert response.status_code == 404

    def test_store_failure_renders_error_page(self, client):
        with patch.object(
            DjangoProductRepository, "brand_counts", new=AsyncMock(side_effect=CatalogStoreError())
        ):
            response = client.get("/")

        assert response.status_code == 500
        assert "Server error" in response.content.decode()

    @pytest.mark.parametrize("path", ["/about", "/contact"])
    def test_static_pages(self, client, path):
        assert client.get(path).status_code == 200


@pytest.mark.django_db
@pytest.mark.integration
class TestManagePages:
    """Tests for create, edit, update and delete pages."""

    def test_create_form(self, client):
        response = client.get(reverse("storefront:create"))

        assert response.status_code == 200
        assert 'name="image"' in response.content.decode()

    def test_create_product(self, client, media_root, image_file):
        response = client.post(
            reverse("storefront:create"),
            {
                "name": "Pixel 9",
                "description": "Camera phone",
                "price": "699.00",
                "brand": "Google Pixel",
                "image": image_file("pixel.jpg"),
            },
        )

        assert response.status_code == 302
        assert response["Location"] == reverse("storefront:create")
        product = Product.objects.get(name="Pixel 9")
        assert product.image.endswith(".jpg")
        assert (media_root / product.image).exists()

    def test_create_invalid_form(self, client, media_root):
        response = client.post(
            reverse("storefront:create"),
            {"name": "", "price": "abc"},
        )

        assert response.status_code == 400
        assert Product.objects.count() == 0

    def test_create_upload_failure(self, client, media_root, image_file):
        with patch.object(FileSystemImageStorage, "save", side_effect=ImageUploadError()):
            response = client.post(
                reverse("storefront:create"),
                {"name": "Pixel 9", "price": "1.00", "brand": "Google", "image": image_file()},
            )

        assert response.status_code == 500
        assert "Error uploading product" in response.content.decode()
        assert Product.objects.count() == 0

    def test_edit_form_prefilled(self, client, db_product):
        response = client.get(reverse("storefront:edit", args=[db_product.id]))

        assert response.status_code == 200
        assert response.context["form"].initial["name"] == "Galaxy S24"
        assert 'name="imageFile"' in response.content.decode()

    def test_edit_missing(self, client):
        response = client.get(reverse("storefront:edit", args=[uuid.uuid4()]))
        assert response.status_code == 404

    def test_update_without_image(self, client, db_product):
        response = client.post(
            reverse("storefront:update", args=[db_product.id]),
            {"name": "Galaxy S24+", "description": "", "price": "899.00", "brand": "Samsung"},
        )

        assert response.status_code == 302
        assert response["Location"] == reverse("storefront:read")
        row = Product.objects.get(id=db_product.id)
        assert row.name == "Galaxy S24+"
        assert row.image == db_product.image

    def test_update_with_image(self, client, db_product, media_root, image_file):
        response = client.post(
            reverse("storefront:update", args=[db_product.id]),
            {
                "name": "Galaxy S24",
                "price": "799.99",
                "brand": "Samsung",
                "imageFile": image_file("new.png"),
            },
        )

        assert response.status_code == 302
        row = Product.objects.get(id=db_product.id)
        assert row.image != db_product.image
        assert (media_root / row.image).exists()

    def test_update_missing(self, client):
        response = client.post(
            reverse("storefront:update", args=[uuid.uuid4()]),
            {"name": "x", "price": "1.00"},
        )
        assert response.status_code == 404

    def test_delete(self, client, db_product):
        response = client.get(reverse("storefront:delete", args=[db_product.id]))

        assert response.status_code == 302
        assert response["Location"] == reverse("storefront:read")
        assert not Product.objects.filter(id=db_product.id).exists()

    def test_delete_missing(self, client):
        response = client.get(reverse("storefront:delete", args=[uuid.uuid4()]))
        assert response.status_code == 404
