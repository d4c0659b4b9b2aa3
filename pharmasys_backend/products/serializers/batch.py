# products/serializers/batch.py

"""
Batch output shapes:
- BatchSerializer:        plain batch row
- BatchStatusSerializer:  batch + product info + derived flags (BatchView)
- ProductInventorySerializer: product + nested BatchStatus rows (ProductInventory)
"""

from rest_framework import serializers

from products.models import Batch
from products.serializers.product import ProductSerializer


class BatchSerializer(serializers.ModelSerializer):
    product_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Batch
        fields = [
            "id",
            "product_id",
            "lot",
            "expiry",
            "qty_on_hand",
            "unit_cost",
            "created_at",
        ]
        read_only_fields = fields


class BatchStatusSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="batch.id")
    product_id = serializers.IntegerField(source="batch.product_id")
    product_name = serializers.CharField(source="batch.product.name")
    code_value = serializers.CharField(source="batch.product.code_value")
    lot = serializers.CharField(source="batch.lot")
    expiry = serializers.DateField(source="batch.expiry", allow_null=True)
    qty_on_hand = serializers.IntegerField(source="batch.qty_on_hand")
    unit_cost = serializers.DecimalField(
        source="batch.unit_cost", max_digits=12, decimal_places=2, allow_null=True
    )
    is_expired = serializers.BooleanField()
    is_near_expiry = serializers.BooleanField()
    status = serializers.CharField(source="status.label")
    severity = serializers.CharField(source="status.severity")


class ProductInventorySerializer(serializers.Serializer):
    product = ProductSerializer()
    batches = BatchStatusSerializer(many=True)
    total_qty_on_hand = serializers.IntegerField()
    is_low_stock = serializers.BooleanField()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        product = data.pop("product")
        return {**product, **data}
