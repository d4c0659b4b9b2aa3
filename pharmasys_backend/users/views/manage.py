# users/views/manage.py

"""
STAFF ACCOUNT MANAGEMENT (admin only)

GET    /api/users/        list
POST   /api/users/        create
DELETE /api/users/<id>/   delete (never your own account)
"""

from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from permissions.roles import CAP_USERS_MANAGE, HasCapability
from users.serializers import UserCreateSerializer, UserSerializer
from users.services import create_staff_user, delete_staff_user

User = get_user_model()


class UserViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_USERS_MANAGE
    serializer_class = UserSerializer
    pagination_class = None
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return User.objects.order_by("username")

    @extend_schema(request=UserCreateSerializer, responses={201: UserSerializer})
    def create(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = create_staff_user(acting_user=request.user, **serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={204: None})
    def destroy(self, request, pk=None):
        delete_staff_user(user_id=pk, acting_user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
