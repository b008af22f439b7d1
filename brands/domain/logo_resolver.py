"""
Brand logo resolution.

Brand names arrive inconsistently ("Google Pixel", "  SAMSUNG ", "One-Plus").
BrandLogoResolver maps any of them to a displayable image reference using
a fixed, ordered table and a tiered matching heuristic:

1. exact match on the normalized key
2. substring match in either direction, first table entry wins
3. first-token match
4. synthesized local path ``/images/<key>.png``

Empty input maps to the default logo. Resolution never raises.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_TOKEN_SEPARATOR = re.compile(r"[^a-z0-9]+")

DEFAULT_LOGO_PATH = "/images/default-logo.png"
FALLBACK_PREFIX = "/images/"


def normalize_brand_key(value: Optional[str]) -> str:
    """
    Build the canonical lookup key for a brand name.

    Trims, lower-cases and strips every character outside ``a-z0-9``.
    The function is idempotent.
    """
    return _NON_ALNUM.sub("", str(value or "").strip().lower())


class LogoMatch(Enum):
    """Tier that produced a resolved logo."""

    DEFAULT = "default"
    EXACT = "exact"
    SUBSTRING = "substring"
    FIRST_TOKEN = "first_token"
    FALLBACK = "fallback"

    def __str__(self) -> str:
        """Return tier as string."""
        return self.value


@dataclass(frozen=True)
class LogoResolution:
    """Resolved logo reference and the tier that produced it."""

    url: str
    match: LogoMatch

    @property
    def is_fallback(self) -> bool:
        """True when no table entry matched."""
        return self.match in (LogoMatch.DEFAULT, LogoMatch.FALLBACK)


class BrandLogoResolver:
    """
    Resolve brand names to logo images.

    The resolver only holds the normalized lookup table built at
    construction; it is safe to share between concurrent requests.
    """

    def __init__(
        self,
        brand_logos: Mapping[str, str],
        default_logo: str = DEFAULT_LOGO_PATH,
        fallback_prefix: str = FALLBACK_PREFIX,
    ):
        """
        Build the lookup table.

        Args:
            brand_logos: Ordered mapping of brand name to logo URL
            default_logo: Path returned for empty brand names
            fallback_prefix: Prefix of the synthesized ``<key>.png`` path
        """
        self._logos: Dict[str, str] = {}
        for name, url in brand_logos.items():
            self._logos[normalize_brand_key(name)] = url
        self.default_logo = default_logo
        self.fallback_prefix = fallback_prefix

    @property
    def keys(self):
        """Normalized table keys in table order."""
        return list(self._logos)

    def resolve(self, brand_name: Optional[str]) -> str:
        """
        Return the logo URL or local path for a brand name.

        Args:
            brand_name: Raw brand name, may be empty or None

        Returns:
            Image reference usable as an ``src`` attribute
        """
        return self.resolve_match(brand_name).url

    def resolve_match(self, brand_name: Optional[str]) -> LogoResolution:
        """
        Resolve a brand name and report which tier matched.

        Args:
            brand_name: Raw brand name, may be empty or None

        Returns:
            LogoResolution with the image reference and matching tier
        """
        if not brand_name:
            return LogoResolution(self.default_logo, LogoMatch.DEFAULT)

        key = normalize_brand_key(brand_name)

        url = self._match_exact(key)
        if url is not None:
            return LogoResolution(url, LogoMatch.EXACT)

        url = self._match_substring(key)
        if url is not None:
            return LogoResolution(url, LogoMatch.SUBSTRING)

        url = self._match_first_token(key)
        if url is not None:
            return LogoResolution(url, LogoMatch.FIRST_TOKEN)

        return LogoResolution(f"{self.fallback_prefix}{key}.png", LogoMatch.FALLBACK)

    def _match_exact(self, key: str) -> Optional[str]:
        return self._logos.get(key)

    def _match_substring(self, key: str) -> Optional[str]:
        # First entry in table order wins, not the longest match.
        for brand_key, url in self._logos.items():
            if brand_key in key or key in brand_key:
                return url
        return None

    def _match_first_token(self, key: str) -> Optional[str]:
        # Splitting after normalization yields the whole key; kept in this order.
        first_token = _TOKEN_SEPARATOR.split(key)[0]
        for brand_key, url in self._logos.items():
            if first_token in brand_key:
                return url
        return None
