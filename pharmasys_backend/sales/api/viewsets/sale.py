# sales/api/viewsets/sale.py

"""
SALE VIEWSET (STAFF)

GET  /api/sales/                 history (?period=&q=&status=) + summary
GET  /api/sales/<id>/            receipt (lines + dispense records)
POST /api/sales/<id>/void/       Completed -> Voided, stock restored

Summary figures are computed over the same filtered rows as results.
"""

from __future__ import annotations

from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from common.exceptions import ValidationError
from permissions.roles import CAP_POS_VOID, CAP_SALES_VIEW, HasCapability
from sales.filters import SaleFilter
from sales.models import Sale
from sales.serializers import (
    SaleDetailSerializer,
    SaleSerializer,
    SalesHistorySerializer,
    VoidInputSerializer,
)
from sales.services.history import PERIODS, summarize_sales
from sales.services.void import void_sale


class SaleViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = SaleSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    capability_map = {
        "list": CAP_SALES_VIEW,
        "retrieve": CAP_SALES_VIEW,
        "void": CAP_POS_VOID,
    }
    pagination_class = None
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        queryset = Sale.objects.order_by("-created_at", "-id")
        if self.action == "retrieve":
            return queryset.prefetch_related("lines__product", "lines__batch", "issues")
        return queryset.prefetch_related("lines__product", "lines__batch")

    def get_serializer_class(self):
        if self.action == "retrieve":
            return SaleDetailSerializer
        return SaleSerializer

    def filter_queryset(self, queryset):
        filterset = SaleFilter(
            self.request.query_params,
            queryset=queryset,
            request=self.request,
            today=timezone.localdate(),
        )
        if not filterset.is_valid():
            field, errors = next(iter(filterset.errors.items()))
            raise ValidationError(f"{field}: {errors[0]}")
        return filterset.qs

    @extend_schema(
        parameters=[
            OpenApiParameter("period", str, enum=list(PERIODS)),
            OpenApiParameter("q", str, description="Search sale id, patient or cashier"),
            OpenApiParameter("status", str, enum=list(Sale.Status.values)),
        ],
        responses={200: SalesHistorySerializer},
    )
    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        payload = {
            "summary": summarize_sales(queryset),
            "results": queryset,
        }
        return Response(SalesHistorySerializer(payload).data)

    @extend_schema(request=VoidInputSerializer, responses={200: SaleSerializer})
    @action(detail=True, methods=["post"])
    def void(self, request, pk=None):
        serializer = VoidInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sale = void_sale(
            sale_id=pk,
            reason=serializer.validated_data["reason"],
            user=request.user,
        )
        return Response(SaleSerializer(sale).data)
