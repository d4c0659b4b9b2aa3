# configuration/views.py

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from configuration.registry import registry
from configuration.serializers import SettingsSerializer
from configuration.services import update_settings
from permissions.roles import CAP_SETTINGS_MANAGE, CAP_SETTINGS_VIEW, HasCapability


class SettingsView(APIView):
    """
    GET  /api/settings/   current thresholds (any staff)
    PUT  /api/settings/   update thresholds (admin)
    """

    permission_classes = [IsAuthenticated, HasCapability]
    capability_map = {
        "get": CAP_SETTINGS_VIEW,
        "put": CAP_SETTINGS_MANAGE,
    }
    serializer_class = SettingsSerializer

    @extend_schema(responses={200: SettingsSerializer})
    def get(self, request):
        return Response(registry.snapshot().as_dict())

    @extend_schema(request=SettingsSerializer, responses={200: SettingsSerializer})
    def put(self, request):
        serializer = SettingsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        thresholds = update_settings(values=serializer.validated_data, user=request.user)
        return Response(thresholds.as_dict())
