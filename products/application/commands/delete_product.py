"""
DeleteProductCommand.
"""

import uuid
from dataclasses import dataclass


@dataclass
class DeleteProductCommand:
    """Command to delete a product by ID."""

    product_id: uuid.UUID
