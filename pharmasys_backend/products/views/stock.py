# products/views/stock.py

"""
STOCK MUTATIONS (admin)

POST /api/receive                  receive a lot (creates product on first sight)
POST /api/receive/parse-gs1        scanned GS1 string -> receive-form fields
POST /api/adjustments              set a batch's counted quantity
GET  /api/adjustments              adjustment audit log, newest first
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.roles import CAP_INVENTORY_ADJUST, CAP_INVENTORY_RECEIVE, HasCapability
from products.filters import AdjustmentFilter
from products.models import Adjustment, Product
from products.serializers import (
    AdjustmentRequestSerializer,
    AdjustmentSerializer,
    BatchSerializer,
    GS1ParseInputSerializer,
    GS1ParseSerializer,
    ProductSerializer,
    ReceiveSerializer,
)
from products.services import adjust_batch_quantity, receive_stock
from products.services.gs1 import parse_gs1
from products.services.stock_adjustments import NO_CHANGE_MESSAGE


class ReceiveView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_INVENTORY_RECEIVE

    @extend_schema(request=ReceiveSerializer, responses={201: BatchSerializer})
    def post(self, request):
        serializer = ReceiveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = receive_stock(user=request.user, **serializer.validated_data)

        payload = dict(BatchSerializer(result.batch).data)
        payload["product"] = ProductSerializer(result.product).data
        payload["product_created"] = result.product_created
        payload["adjustment_id"] = result.adjustment.id
        return Response(payload, status=status.HTTP_201_CREATED)


class GS1ParseView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_INVENTORY_RECEIVE

    @extend_schema(request=GS1ParseInputSerializer, responses={200: GS1ParseSerializer})
    def post(self, request):
        serializer = GS1ParseInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        parsed = parse_gs1(serializer.validated_data["barcode"])
        product = Product.objects.filter(code_value__iexact=parsed.gtin).order_by("id").first()

        return Response(
            GS1ParseSerializer(
                {
                    "gtin": parsed.gtin,
                    "lot": parsed.lot,
                    "expiry": parsed.expiry,
                    "product": product,
                }
            ).data
        )


class AdjustmentView(generics.ListAPIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_INVENTORY_ADJUST
    serializer_class = AdjustmentSerializer
    filterset_class = AdjustmentFilter
    pagination_class = None

    def get_queryset(self):
        return Adjustment.objects.select_related("product", "batch").order_by("-created_at", "-id")

    @extend_schema(
        request=AdjustmentRequestSerializer,
        responses={
            200: BatchSerializer,
            400: OpenApiResponse(description="Invalid input"),
            404: OpenApiResponse(description="Unknown batch"),
        },
    )
    def post(self, request):
        serializer = AdjustmentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = adjust_batch_quantity(user=request.user, **serializer.validated_data)

        if not result.changed:
            return Response({"message": NO_CHANGE_MESSAGE})

        payload = dict(BatchSerializer(result.batch).data)
        payload["delta"] = result.delta
        payload["adjustment_id"] = result.adjustment.id
        return Response(payload)
