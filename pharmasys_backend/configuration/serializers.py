# configuration/serializers.py

from rest_framework import serializers

from common.serializers import StrictSerializer


class SettingsSerializer(StrictSerializer):
    LowStockThreshold = serializers.IntegerField(min_value=1, required=False)
    NearExpiryDays = serializers.IntegerField(min_value=1, required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Supply LowStockThreshold and/or NearExpiryDays.")
        return attrs
