"""
Unit tests for BrandLogoService and logo table configuration.
"""

import json

import pytest
from prometheus_client import REGISTRY

from brands.application.services.logo_service import (
    configured_brand_logos,
    get_brand_logo_service,
    load_brand_logos,
)
from brands.domain.logo_resolver import LogoMatch
from brands.domain.logos import DEFAULT_BRAND_LOGOS


def _tier_count(tier):
    return REGISTRY.get_sample_value("brand_logo_resolutions_total", {"tier": tier}) or 0.0


class TestBrandLogoService:
    """Tests for BrandLogoService."""

    def test_resolve_records_tier(self, logo_service):
        before = _tier_count("exact")
        resolution = logo_service.resolve("Samsung")

        assert resolution.match is LogoMatch.EXACT
        assert _tier_count("exact") == before + 1

    def test_logo_for_returns_url(self, logo_service):
        assert logo_service.logo_for("Google Pixel") == "https://logos.example/google.png"
        assert logo_service.logo_for(None) == "/images/default-logo.png"


class TestLogoConfiguration:
    """Tests for building the logo table from settings."""

    def test_defaults_to_builtin_table(self, settings):
        settings.BRAND_LOGOS = None
        settings.BRAND_LOGOS_FILE = None
        assert configured_brand_logos() == DEFAULT_BRAND_LOGOS

    def test_settings_table(self, settings):
        settings.BRAND_LOGOS = {"Acme": "https://logos.example/acme.png"}
        settings.BRAND_LOGOS_FILE = None

        service = get_brand_logo_service()
        assert service.logo_for("ACME phones") == "https://logos.example/acme.png"

    def test_file_table_keeps_order(self, settings, tmp_path):
        path = tmp_path / "logos.json"
        path.write_text(
            json.dumps({"zeta": "https://logos.example/z.png", "alpha": "https://logos.example/a.png"})
        )
        settings.BRAND_LOGOS_FILE = str(path)

        assert list(configured_brand_logos()) == ["zeta", "alpha"]
        assert get_brand_logo_service().resolver.keys == ["zeta", "alpha"]

    def test_file_must_hold_object(self, tmp_path):
        path = tmp_path / "logos.json"
        path.write_text(json.dumps(["samsung"]))

        with pytest.raises(ValueError):
            load_brand_logos(str(path))

    def test_default_logo_setting(self, settings):
        settings.DEFAULT_BRAND_LOGO = "/images/none.png"
        settings.BRAND_LOGO_FALLBACK_PREFIX = "/logos/"

        service = get_brand_logo_service()
        assert service.logo_for("") == "/images/none.png"
        assert service.logo_for("Acme Corp") == "/logos/acmecorp.png"

    def test_service_is_cached(self):
        assert get_brand_logo_service() is get_brand_logo_service()
