"""
Serializers for Product API endpoints.
"""

from rest_framework import serializers


class ProductWriteSerializer(serializers.Serializer):
    """Serializer for product create requests."""

    name = serializers.CharField(required=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(required=True, max_digits=12, decimal_places=2)
    brand = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    image = serializers.FileField(required=True)


class ProductUpdateSerializer(ProductWriteSerializer):
    """Serializer for product updates; the image is optional."""

    image = serializers.FileField(required=False, allow_null=True)


class ProductDTOSerializer(serializers.Serializer):
    """Serializer for ProductDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    brand = serializers.CharField()
    image = serializers.CharField()
    image_url = serializers.CharField()
    brand_logo = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
