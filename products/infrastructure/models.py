"""
Product model.
"""

import uuid

from django.db import models


class Product(models.Model):
    """
    Represents a catalog product (e.g., Galaxy S24, Pixel 9).
    Products are grouped by their free-text brand.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text="Product display name")
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=12, decimal_places=2)
    brand = models.CharField(max_length=255, blank=True, default="", help_text="Brand name")
    image = models.CharField(
        max_length=500,
        blank=True,
        default="",
        help_text="Stored image file name or path",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "products"
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["brand"], name="products_brand_idx"),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.name:
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.brand} - {self.name}" if self.brand else self.name
