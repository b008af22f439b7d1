"""
GetProductQuery.
"""

import uuid
from dataclasses import dataclass


@dataclass
class GetProductQuery:
    """Query for a single product."""

    product_id: uuid.UUID
