# products/views/dashboard.py

from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from configuration.registry import registry
from permissions.roles import CAP_INVENTORY_VIEW, HasCapability
from products.serializers import DashboardSerializer
from products.services.dashboard import build_dashboard


class DashboardView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_INVENTORY_VIEW

    @extend_schema(responses={200: DashboardSerializer})
    def get(self, request):
        tiles = build_dashboard(today=timezone.localdate(), thresholds=registry.snapshot())
        return Response(DashboardSerializer(tiles).data)
