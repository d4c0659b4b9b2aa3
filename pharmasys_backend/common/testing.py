# common/testing.py

"""
TEST HELPERS

Shared by the app test suites:
- staff user creation (Admin / Cashier)
- APIClient carrying a real bearer token (exercises JWTAuthentication)
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from permissions.roles import ROLE_ADMIN, ROLE_CASHIER
from users.tokens import issue_access_token_string

DEFAULT_TEST_PASSWORD = "testpass123"


def create_test_user(*, username: str, role: str = ROLE_CASHIER, password: str = DEFAULT_TEST_PASSWORD, **extra):
    User = get_user_model()
    extra.setdefault("full_name", username.title())
    return User.objects.create_user(username, password=password, role=role, **extra)


def create_admin(username: str = "admin", **extra):
    return create_test_user(username=username, role=ROLE_ADMIN, **extra)


def create_cashier(username: str = "cashier1", **extra):
    return create_test_user(username=username, role=ROLE_CASHIER, **extra)


def api_client_for(user=None) -> APIClient:
    client = APIClient()
    if user is not None:
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_access_token_string(user)}")
    return client
