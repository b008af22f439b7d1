"""
Serializers for Brand API endpoints.
"""

from rest_framework import serializers


class BrandSummarySerializer(serializers.Serializer):
    """Serializer for BrandSummaryDTO."""

    name = serializers.CharField()
    count = serializers.IntegerField()
    image = serializers.CharField()


class BrandLogoSerializer(serializers.Serializer):
    """Serializer for BrandLogoDTO."""

    name = serializers.CharField(allow_blank=True)
    normalized_key = serializers.CharField(allow_blank=True)
    logo = serializers.CharField()
    match = serializers.ChoiceField(
        choices=["default", "exact", "substring", "first_token", "fallback"]
    )
