# products/serializers/product.py

from rest_framework import serializers

from common.serializers import StrictModelSerializer
from products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = [
            "id",
            "code_type",
            "code_value",
            "name",
            "strength",
            "form",
            "pack_size",
            "uom",
            "unit_price",
            "unit_cost",
            "created_at",
        ]
        read_only_fields = fields


class ProductCreateSerializer(StrictModelSerializer):
    """
    Register a product without stock (stock arrives through /receive/).
    code_value uniqueness comes from the model's UniqueValidator.
    """

    class Meta:
        model = Product
        fields = [
            "code_type",
            "code_value",
            "name",
            "strength",
            "form",
            "pack_size",
            "uom",
            "unit_price",
            "unit_cost",
        ]
        extra_kwargs = {
            "unit_price": {"min_value": 0},
            "unit_cost": {"min_value": 0},
        }

    def validate_code_value(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("code_value is required")
        return value
