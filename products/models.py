"""
Model registry for the products app.

The model lives in the infrastructure layer; importing it here lets
Django discover it.
"""

from products.infrastructure.models import Product  # noqa: F401
