# products/serializers/gs1.py

from rest_framework import serializers

from common.serializers import StrictSerializer

from .product import ProductSerializer


class GS1ParseInputSerializer(StrictSerializer):
    barcode = serializers.CharField(trim_whitespace=False)


class GS1ParseSerializer(serializers.Serializer):
    """Parsed receiving fields plus the stored product for the GTIN, if any."""

    gtin = serializers.CharField()
    lot = serializers.CharField(allow_null=True)
    expiry = serializers.DateField(allow_null=True)
    product = ProductSerializer(allow_null=True)
