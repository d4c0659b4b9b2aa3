# users/serializers.py

from rest_framework import serializers
from django.contrib.auth import get_user_model

from common.serializers import StrictSerializer
from permissions.roles import ROLE_CHOICES

User = get_user_model()


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(StrictSerializer):
    """
    Input validation only.
    Authentication is handled by users.services.authenticate_credentials.
    """
    username = serializers.CharField(max_length=150, trim_whitespace=True)
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )


class TokenSerializer(serializers.Serializer):
    token = serializers.CharField()


# ---------------- CREATE USER (INPUT ONLY) ----------------
class UserCreateSerializer(StrictSerializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )
    confirm_password = serializers.CharField(
        write_only=True,
        required=False,
        trim_whitespace=False,
        style={"input_type": "password"},
    )
    full_name = serializers.CharField(max_length=255)
    role = serializers.ChoiceField(choices=ROLE_CHOICES)

    def validate(self, attrs):
        confirm = attrs.pop("confirm_password", None)
        if confirm is not None and confirm != attrs["password"]:
            raise serializers.ValidationError({"confirm_password": ["Passwords do not match."]})
        return attrs


# ---------------- USER OUTPUT ----------------
class UserSerializer(serializers.ModelSerializer):
    """
    Safe user representation (no password hash).
    """
    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "full_name",
            "role",
            "is_active",
            "created_at",
        ]
        read_only_fields = fields


class MeSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username", "role", "full_name"]
        read_only_fields = fields
