"""
ListProductsQuery.

Query to list catalog products, optionally for one brand.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ListProductsQuery:
    """
    Query to list products.

    Note: brand matches the stored brand exactly (no normalization).
    """

    brand: Optional[str] = None
