"""
ListBrandsHandler.

Handler for listing brands with logos attached.
"""

import logging
from typing import List

from brands.application.dto.brand_dto import BrandSummaryDTO
from brands.application.queries.list_brands import ListBrandsQuery
from brands.application.services.logo_service import BrandLogoService
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListBrandsHandler:
    """Handler for ListBrandsQuery."""

    def __init__(
        self,
        product_repository: ProductRepository,
        logo_service: BrandLogoService,
    ):
        """Initialize handler with repository and logo service."""
        self.product_repository = product_repository
        self.logo_service = logo_service

    async def handle(self, query: ListBrandsQuery) -> List[BrandSummaryDTO]:
        """
        Handle list brands query.

        Args:
            query: ListBrandsQuery

        Returns:
            List of BrandSummaryDTO sorted by brand name
        """
        summaries = await self.product_repository.brand_counts()

        brands = []
        unmatched = []
        for summary in summaries:
            resolution = self.logo_service.resolve(summary.name)
            if resolution.is_fallback:
                unmatched.append({"name": summary.name, "image": resolution.url})
            brands.append(
                BrandSummaryDTO(name=summary.name, count=summary.count, image=resolution.url)
            )

        if unmatched:
            logger.warning(
                "Brands missing remote logo mapping (will use local/default): %s",
                ", ".join(item["name"] for item in unmatched),
                extra={"unmatched_brands": unmatched},
            )

        return brands
