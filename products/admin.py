"""
Django admin configuration for products app.
"""

from django.contrib import admin
from django.utils.html import format_html

from brands.application.services.logo_service import get_brand_logo_service
from products.infrastructure.models import Product
from products.infrastructure.storage.file_system_image_storage import FileSystemImageStorage

_image_storage = FileSystemImageStorage()


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "brand_logo_display", "brand", "price", "image_display", "created_at"]
    list_filter = ["brand", "created_at", "updated_at"]
    search_fields = ["name", "brand", "description"]
    readonly_fields = ["id", "image_display", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "brand", "price", "description"),
            },
        ),
        (
            "Image",
            {
                "fields": ("image", "image_display"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def brand_logo_display(self, obj):
        """Display the resolved brand logo."""
        return format_html(
            '<img src="{}" alt="{}" style="height: 20px;" />',
            get_brand_logo_service().logo_for(obj.brand),
            obj.brand,
        )

    brand_logo_display.short_description = "Logo"

    def image_display(self, obj):
        """Display a thumbnail of the product image."""
        if not obj.image:
            return "-"
        return format_html(
            '<img src="{}" alt="{}" style="max-height: 60px;" />',
            _image_storage.url(obj.image),
            obj.name,
        )

    image_display.short_description = "Preview"
