"""
Brand DTOs for views and API responses.
"""

from dataclasses import dataclass


@dataclass
class BrandSummaryDTO:
    """DTO for a brand group on the home page."""

    name: str
    count: int
    image: str


@dataclass
class BrandLogoDTO:
    """DTO for a single logo lookup."""

    name: str
    normalized_key: str
    logo: str
    match: str
