"""
Django management command to seed the catalog with sample products.

Creates ``--count`` products for every ``--brand`` through the same
handlers the storefront and API use, so images are stored and metrics
recorded as for real uploads.
"""

import base64
import logging
import os
from decimal import Decimal

from asgiref.sync import async_to_sync
from django.core.files.base import ContentFile
from django.core.management.base import BaseCommand, CommandError

from brands.application.services.logo_service import get_brand_logo_service
from core.domain.exceptions import DomainException
from products.application.commands.create_product import CreateProductCommand
from products.application.handlers.product_handlers import CreateProductHandler
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from products.infrastructure.storage.file_system_image_storage import FileSystemImageStorage

logger = logging.getLogger(__name__)

DEFAULT_BRANDS = ["Samsung", "Apple", "Xiaomi", "Google Pixel"]

# 1x1 transparent PNG
PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


class Command(BaseCommand):
    """Command to create sample products."""

    help = "Create sample products for one or more brands"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--brand",
            action="append",
            dest="brands",
            default=None,
            help="Brand to seed; repeat for several (default: %s)" % ", ".join(DEFAULT_BRANDS),
        )
        parser.add_argument(
            "--count",
            type=int,
            default=3,
            help="Products per brand (default: 3)",
        )
        parser.add_argument(
            "--image",
            type=str,
            default=None,
            help="Image file attached to every product (default: placeholder PNG)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if options["count"] < 1:
            raise CommandError("--count must be at least 1")

        brands = options["brands"] or DEFAULT_BRANDS
        image_name, image_bytes = self.load_image(options["image"])

        handler = CreateProductHandler(
            product_repository=DjangoProductRepository(),
            image_storage=FileSystemImageStorage(),
            logo_service=get_brand_logo_service(),
        )

        created = 0
        for brand in brands:
            for index in range(1, options["count"] + 1):
                command = CreateProductCommand(
                    name=f"{brand} Model {index}",
                    description=f"Sample {brand} product #{index}",
                    price=Decimal(100 * index) + Decimal("0.99"),
                    brand=brand,
                    image=ContentFile(image_bytes, name=image_name),
                )
                try:
                    product = async_to_sync(handler.handle)(command)
                except DomainException as e:
                    raise CommandError(f"Could not create {command.name}: {e.message}") from e
                created += 1
                self.stdout.write(f"  {product.brand:<16} {product.name:<28} {product.image}")

        logger.info("Catalog seeded", extra={"brands": brands, "created": created})
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created {created} products"))

    def load_image(self, path):
        """Return (file name, bytes) for the image attached to seeded products."""
        if not path:
            return "placeholder.png", PLACEHOLDER_PNG
        if not os.path.isfile(path):
            raise CommandError(f"Image file not found: {path}")
        with open(path, "rb") as fh:
            return os.path.basename(path), fh.read()
