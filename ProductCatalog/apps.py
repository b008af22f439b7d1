"""
App configuration for the Product Catalog project.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

_SKIP_COMMANDS = {
    "migrate",
    "makemigrations",
    "collectstatic",
    "shell",
    "test",
    "check",
    "createsuperuser",
}


class ProductCatalogConfig(AppConfig):
    """App configuration for ProductCatalog."""

    name = "ProductCatalog"
    verbose_name = "Product Catalog"

    def ready(self):
        """Set up observability once the app registry is ready."""
        if len(sys.argv) > 1 and sys.argv[1] in _SKIP_COMMANDS:
            return

        # Django's autoreloader imports the project twice; only the child serves.
        if os.environ.get("RUN_MAIN") == "false":
            return

        if getattr(self, "_initialized", False):
            return

        from core.instrumentation import setup_opentelemetry

        logger.info("Setting up observability...")
        setup_opentelemetry()
        self._initialized = True
        logger.info("Observability setup complete")
