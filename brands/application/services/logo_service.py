"""
Brand logo service.

Wraps the BrandLogoResolver with metrics and builds the process-wide
instance from Django settings.
"""

import json
import logging
from functools import lru_cache
from typing import Dict, Optional

from django.conf import settings

from brands.domain.logo_resolver import (
    DEFAULT_LOGO_PATH,
    FALLBACK_PREFIX,
    BrandLogoResolver,
    LogoResolution,
)
from brands.domain.logos import DEFAULT_BRAND_LOGOS
from core.metrics import brand_logo_resolutions_total

logger = logging.getLogger(__name__)


class BrandLogoService:
    """Application service for brand logo lookups."""

    def __init__(self, resolver: BrandLogoResolver):
        """Initialize service with a resolver."""
        self.resolver = resolver

    def resolve(self, brand_name: Optional[str]) -> LogoResolution:
        """
        Resolve a brand logo and record the matching tier.

        Args:
            brand_name: Raw brand name

        Returns:
            LogoResolution
        """
        resolution = self.resolver.resolve_match(brand_name)
        brand_logo_resolutions_total.labels(tier=resolution.match.value).inc()
        return resolution

    def logo_for(self, brand_name: Optional[str]) -> str:
        """Return only the logo reference for a brand name."""
        return self.resolve(brand_name).url


def load_brand_logos(path: str) -> Dict[str, str]:
    """
    Load a brand logo table from a JSON object file.

    Key order in the file is kept as table order.
    """
    with open(path, encoding="utf-8") as fh:
        logos = json.load(fh)
    if not isinstance(logos, dict):
        raise ValueError(f"Brand logo file must contain a JSON object: {path}")
    return logos


def configured_brand_logos() -> Dict[str, str]:
    """Brand logo table from settings, falling back to the built-in table."""
    logos_file = getattr(settings, "BRAND_LOGOS_FILE", None)
    if logos_file:
        logger.info("Loading brand logos from %s", logos_file)
        return load_brand_logos(logos_file)
    return getattr(settings, "BRAND_LOGOS", None) or DEFAULT_BRAND_LOGOS


@lru_cache(maxsize=1)
def get_brand_logo_service() -> BrandLogoService:
    """
    Return the process-wide logo service.

    Built once on first use; call ``get_brand_logo_service.cache_clear()``
    after changing logo settings.
    """
    resolver = BrandLogoResolver(
        configured_brand_logos(),
        default_logo=getattr(settings, "DEFAULT_BRAND_LOGO", DEFAULT_LOGO_PATH),
        fallback_prefix=getattr(settings, "BRAND_LOGO_FALLBACK_PREFIX", FALLBACK_PREFIX),
    )
    logger.debug("Brand logo table built", extra={"brands": resolver.keys})
    return BrandLogoService(resolver)
