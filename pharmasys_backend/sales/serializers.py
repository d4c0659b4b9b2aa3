# sales/serializers.py

from rest_framework import serializers

from common.serializers import StrictSerializer
from pos.serializers import CartLineInputSerializer
from sales.models import Issue, Sale, SaleLine


# ============================================================
# INPUT SERIALIZERS
# ============================================================


class CheckoutInputSerializer(StrictSerializer):
    lines = CartLineInputSerializer(many=True, allow_empty=False)
    payment_method = serializers.ChoiceField(choices=Sale.PaymentMethod.choices)
    cash_received = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    tax = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    patient = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class VoidInputSerializer(StrictSerializer):
    reason = serializers.CharField(max_length=200)


# ============================================================
# READ SERIALIZERS
# ============================================================


class SaleLineSerializer(serializers.ModelSerializer):
    """Receipt line: product + batch snapshot."""

    product_name = serializers.CharField(source="product.name", read_only=True)
    lot = serializers.CharField(source="batch.lot", read_only=True)
    expiry = serializers.DateField(source="batch.expiry", read_only=True, allow_null=True)

    class Meta:
        model = SaleLine
        fields = [
            "id",
            "product",
            "product_name",
            "batch",
            "lot",
            "expiry",
            "qty",
            "unit_price",
            "line_total",
        ]
        read_only_fields = fields


class IssueSerializer(serializers.ModelSerializer):
    class Meta:
        model = Issue
        fields = ["id", "created_at", "created_by", "product", "batch", "qty", "patient"]
        read_only_fields = fields


class SaleSerializer(serializers.ModelSerializer):
    lines = SaleLineSerializer(many=True, read_only=True)

    class Meta:
        model = Sale
        fields = [
            "id",
            "created_at",
            "created_by",
            "patient",
            "subtotal",
            "discount",
            "tax",
            "total",
            "payment_method",
            "cash_received",
            "change_due",
            "notes",
            "status",
            "voided_at",
            "void_reason",
            "lines",
        ]
        read_only_fields = fields


class SaleDetailSerializer(SaleSerializer):
    issues = IssueSerializer(many=True, read_only=True)

    class Meta(SaleSerializer.Meta):
        fields = SaleSerializer.Meta.fields + ["issues"]
        read_only_fields = fields


class SalesSummarySerializer(serializers.Serializer):
    completed_count = serializers.IntegerField()
    completed_total = serializers.DecimalField(max_digits=14, decimal_places=2)
    voided_count = serializers.IntegerField()


class SalesHistorySerializer(serializers.Serializer):
    summary = SalesSummarySerializer()
    results = SaleSerializer(many=True)
