# products/serializers/stock.py

from rest_framework import serializers

from common.serializers import StrictSerializer
from products.models import Adjustment, Product
from products.serializers.batch import BatchStatusSerializer


# ---------------- RECEIVE (INPUT) ----------------
class ReceiveSerializer(StrictSerializer):
    code_type = serializers.ChoiceField(choices=Product.CodeType.choices, required=False)
    code_value = serializers.CharField(max_length=128)
    name = serializers.CharField(max_length=255)
    strength = serializers.CharField(max_length=64, required=False, allow_blank=True)
    form = serializers.CharField(max_length=64, required=False, allow_blank=True)
    pack_size = serializers.CharField(max_length=64, required=False, allow_blank=True)
    uom = serializers.CharField(max_length=32, required=False, allow_blank=True)
    unit_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )

    lot = serializers.CharField(max_length=128)
    expiry = serializers.DateField()
    qty = serializers.IntegerField(min_value=1)
    unit_cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


# ---------------- ADJUST (INPUT) ----------------
class AdjustmentRequestSerializer(StrictSerializer):
    batch_id = serializers.IntegerField(min_value=1)
    new_qty = serializers.IntegerField(min_value=0)
    reason = serializers.CharField(max_length=255)


# ---------------- AUDIT LOG (OUTPUT) ----------------
class AdjustmentSerializer(serializers.ModelSerializer):
    product_id = serializers.IntegerField(read_only=True)
    batch_id = serializers.IntegerField(read_only=True, allow_null=True)
    product_name = serializers.CharField(source="product.name", read_only=True)
    lot = serializers.CharField(source="batch.lot", read_only=True, default=None)

    class Meta:
        model = Adjustment
        fields = [
            "id",
            "created_at",
            "created_by",
            "product_id",
            "product_name",
            "batch_id",
            "lot",
            "delta",
            "reason",
        ]
        read_only_fields = fields


class DashboardSerializer(serializers.Serializer):
    today_sales = serializers.DecimalField(max_digits=14, decimal_places=2)
    distinct_products = serializers.IntegerField()
    total_batches = serializers.IntegerField()
    total_on_hand = serializers.IntegerField()
    expired_count = serializers.IntegerField()
    near_expiry_count = serializers.IntegerField()
    low_stock_count = serializers.IntegerField()
    stock_value = serializers.DecimalField(max_digits=18, decimal_places=2)
    near_expiry = BatchStatusSerializer(many=True)
