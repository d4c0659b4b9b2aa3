# products/views/inventory.py

"""
INVENTORY BROWSING

GET /api/inventory/           products + nested batches + stock flags
GET /api/inventory/batches/   flat batch rows (?filter=&q=&product_id=)
GET /api/inventory/export/    the same rows as CSV
"""

from django.http import HttpResponse
from django.utils import timezone
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from common.exceptions import ValidationError
from configuration.registry import registry
from permissions.roles import CAP_INVENTORY_VIEW, HasCapability
from products.filters import BatchFilter
from products.models import Batch
from products.serializers import BatchStatusSerializer, ProductInventorySerializer
from products.services.inventory import (
    batch_rows,
    expiry_ordering,
    inventory_overview,
    write_batches_csv,
)

BATCH_LIST_PARAMETERS = [
    OpenApiParameter("filter", str, enum=["all", "expired", "nearexpiry", "lowstock"]),
    OpenApiParameter("q", str, description="Search product name, code or lot"),
    OpenApiParameter("product_id", int),
]


class InventoryPermissionMixin:
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_INVENTORY_VIEW


class InventoryView(InventoryPermissionMixin, APIView):
    @extend_schema(responses={200: ProductInventorySerializer(many=True)})
    def get(self, request):
        overview = inventory_overview(
            today=timezone.localdate(),
            thresholds=registry.snapshot(),
        )
        return Response(ProductInventorySerializer(overview, many=True).data)


class FilteredBatchesMixin(InventoryPermissionMixin):
    def filtered_rows(self, request):
        today = timezone.localdate()
        thresholds = registry.snapshot()

        queryset = Batch.objects.select_related("product").order_by(*expiry_ordering())
        filterset = BatchFilter(
            request.query_params,
            queryset=queryset,
            request=request,
            today=today,
            thresholds=thresholds,
        )
        if not filterset.is_valid():
            field, errors = next(iter(filterset.errors.items()))
            raise ValidationError(f"{field}: {errors[0]}")

        return batch_rows(filterset.qs, today=today, thresholds=thresholds)


class BatchListView(FilteredBatchesMixin, APIView):
    @extend_schema(parameters=BATCH_LIST_PARAMETERS, responses={200: BatchStatusSerializer(many=True)})
    def get(self, request):
        return Response(BatchStatusSerializer(self.filtered_rows(request), many=True).data)


class InventoryExportView(FilteredBatchesMixin, APIView):
    @extend_schema(parameters=BATCH_LIST_PARAMETERS, responses={(200, "text/csv"): OpenApiTypes.STR})
    def get(self, request):
        response = HttpResponse(content_type="text/csv")
        response["Content-Disposition"] = (
            f'attachment; filename="inventory-{timezone.localdate().isoformat()}.csv"'
        )
        write_batches_csv(self.filtered_rows(request), response)
        return response
