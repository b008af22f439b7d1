"""
Brand summary domain entity.

Brands are not stored on their own; they are derived from the brand
field of products.
"""

from dataclasses import dataclass

UNKNOWN_BRAND = "Unknown"


@dataclass(frozen=True)
class BrandSummary:
    """
    A brand and how many products carry it.

    Represents one group of the product catalog.
    """

    name: str
    count: int

    def __post_init__(self):
        """Validate brand summary."""
        if self.count < 0:
            raise ValueError("Brand product count cannot be negative")

    @classmethod
    def create(cls, name: str, count: int) -> "BrandSummary":
        """
        Create a brand summary.

        Args:
            name: Brand name as stored on products (may be empty)
            count: Number of products with that brand

        Returns:
            BrandSummary with empty names reported as "Unknown"
        """
        return cls(name=name or UNKNOWN_BRAND, count=count)
