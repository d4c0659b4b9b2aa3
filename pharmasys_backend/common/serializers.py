# common/serializers.py

"""
STRICT REQUEST SERIALIZERS

Request bodies are parsed into a fixed shape before any business logic runs.
DRF silently drops unknown keys; these serializers reject them instead so a
typo in a payload surfaces as a 400 rather than a silently ignored field.
"""

from __future__ import annotations

from rest_framework import serializers


class RejectUnknownFieldsMixin:
    def to_internal_value(self, data):
        if isinstance(data, dict):
            unknown = sorted(set(data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError(
                    {key: ["Unknown field."] for key in unknown}
                )
        return super().to_internal_value(data)


class StrictSerializer(RejectUnknownFieldsMixin, serializers.Serializer):
    pass


class StrictModelSerializer(RejectUnknownFieldsMixin, serializers.ModelSerializer):
    pass
