# pos/serializers.py

from rest_framework import serializers

from common.serializers import StrictSerializer
from pos.services.cart import PAYMENT_METHODS


# ============================================================
# INPUT SERIALIZERS
# ============================================================


class CartLineInputSerializer(StrictSerializer):
    product_id = serializers.IntegerField(min_value=1)
    qty = serializers.IntegerField(min_value=1)
    batch_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)


class QuoteInputSerializer(StrictSerializer):
    lines = CartLineInputSerializer(many=True, allow_empty=False)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    tax = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    payment_method = serializers.ChoiceField(choices=PAYMENT_METHODS, required=False)
    cash_received = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )


# ============================================================
# OUTPUT SERIALIZERS
# ============================================================


class CartLineSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(source="product.id")
    product_name = serializers.CharField(source="product.name")
    batch_id = serializers.IntegerField(source="batch.id")
    lot = serializers.CharField(source="batch.lot")
    expiry = serializers.DateField(source="batch.expiry", allow_null=True)
    available = serializers.IntegerField(source="batch.qty_on_hand")
    qty = serializers.IntegerField()
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    line_total = serializers.DecimalField(max_digits=14, decimal_places=2)


class QuoteSerializer(serializers.Serializer):
    lines = CartLineSerializer(many=True)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2)
    tax = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    payment_method = serializers.CharField(allow_null=True)
    cash_received = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    change_due = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)


class AvailableBatchSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    product_id = serializers.IntegerField()
    product_name = serializers.CharField(source="product.name")
    code_value = serializers.CharField(source="product.code_value")
    strength = serializers.CharField(source="product.strength")
    form = serializers.CharField(source="product.form")
    unit_price = serializers.DecimalField(
        source="product.unit_price", max_digits=12, decimal_places=2, allow_null=True
    )
    lot = serializers.CharField()
    expiry = serializers.DateField(allow_null=True)
    qty_on_hand = serializers.IntegerField()
