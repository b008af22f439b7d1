# Generated manually
import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(help_text="Product display name", max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "brand",
                    models.CharField(
                        blank=True, default="", help_text="Brand name", max_length=255
                    ),
                ),
                (
                    "image",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Stored image file name or path",
                        max_length=500,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["brand"], name="products_brand_idx")],
            },
        ),
    ]
