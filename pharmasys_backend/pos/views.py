# pos/views.py

from __future__ import annotations

from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.roles import CAP_POS_SELL, HasCapability
from pos.serializers import AvailableBatchSerializer, QuoteInputSerializer, QuoteSerializer
from pos.services.cart import build_cart, settle_payment
from pos.services.catalog import available_batches
from products.models import Batch, Product


# ============================================================
# CART QUOTE (READ-ONLY PREVIEW)
# ============================================================


class QuoteView(APIView):
    """
    POST /api/pos/quote/

    Build the cart against current stock and return batch assignments and
    totals. Nothing is written; checkout re-validates under row locks.
    """

    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_POS_SELL

    @extend_schema(request=QuoteInputSerializer, responses={200: QuoteSerializer})
    def post(self, request):
        serializer = QuoteInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        product_ids = {line["product_id"] for line in data["lines"]}
        products = Product.objects.in_bulk(product_ids)
        batches = list(Batch.objects.filter(product_id__in=product_ids).order_by("id"))

        cart = build_cart(data["lines"], products=products, batches=batches, today=timezone.localdate())
        totals = cart.totals(discount=data["discount"], tax=data["tax"])

        payment = None
        if data.get("payment_method"):
            payment = settle_payment(totals, data["payment_method"], data.get("cash_received"))

        return Response(
            QuoteSerializer(
                {
                    "lines": cart.lines,
                    "subtotal": totals.subtotal,
                    "discount": totals.discount,
                    "tax": totals.tax,
                    "total": totals.total,
                    "payment_method": payment.method if payment else None,
                    "cash_received": payment.cash_received if payment else None,
                    "change_due": payment.change_due if payment else None,
                }
            ).data
        )


# ============================================================
# SELLABLE BATCHES (POS PRODUCT GRID)
# ============================================================


class AvailableBatchesView(APIView):
    """GET /api/pos/batches?q=  in-stock, unexpired batches in FEFO order."""

    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_POS_SELL

    @extend_schema(
        parameters=[OpenApiParameter("q", str, description="Search product name or code")],
        responses={200: AvailableBatchSerializer(many=True)},
    )
    def get(self, request):
        rows = available_batches(
            today=timezone.localdate(),
            query=request.query_params.get("q", ""),
        )
        return Response(AvailableBatchSerializer(rows, many=True).data)
