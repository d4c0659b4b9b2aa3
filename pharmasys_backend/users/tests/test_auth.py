# users/tests/test_auth.py

from __future__ import annotations

from datetime import timedelta

import jwt
from django.conf import settings
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from common.testing import api_client_for, create_admin, create_cashier
from users.tokens import issue_access_token


class LoginTests(TestCase):
    """
    GUARANTEES:
    - Valid credentials return a bearer token with userId / username / role
    - Unknown user, wrong password and inactive user share one 401 message
    - Unknown request keys are rejected
    """

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("users:login")
        self.cashier = create_cashier(password="correct-horse")

    def test_login_returns_token_with_claims(self):
        res = self.client.post(
            self.url, {"username": "cashier1", "password": "correct-horse"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        payload = jwt.decode(res.data["token"], settings.JWT_SECRET, algorithms=["HS256"])
        self.assertEqual(payload["userId"], self.cashier.id)
        self.assertEqual(payload["username"], "cashier1")
        self.assertEqual(payload["role"], "Cashier")
        self.assertEqual(payload["exp"] - payload["iat"], 3600)

    def test_username_lookup_is_case_insensitive(self):
        res = self.client.post(
            self.url, {"username": "CASHIER1", "password": "correct-horse"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_wrong_password_and_unknown_user_are_indistinguishable(self):
        wrong = self.client.post(
            self.url, {"username": "cashier1", "password": "nope-nope"}, format="json"
        )
        unknown = self.client.post(
            self.url, {"username": "ghost", "password": "nope-nope"}, format="json"
        )

        self.assertEqual(wrong.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(unknown.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(wrong.data, {"error": "Invalid username or password"})
        self.assertEqual(wrong.data, unknown.data)

    def test_inactive_user_cannot_login(self):
        self.cashier.is_active = False
        self.cashier.save()

        res = self.client.post(
            self.url, {"username": "cashier1", "password": "correct-horse"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data["error"], "Invalid username or password")

    def test_unknown_keys_rejected(self):
        res = self.client.post(
            self.url,
            {"username": "cashier1", "password": "correct-horse", "role": "Admin"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("role", res.data["fields"])


class TokenGateTests(TestCase):
    """
    GUARANTEES:
    - /me/ reflects the token's identity
    - Missing, tampered and expired tokens are all 401
    """

    def setUp(self):
        self.admin = create_admin()
        self.url = reverse("users:me")

    def test_me_returns_identity(self):
        res = api_client_for(self.admin).get(self.url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.data,
            {
                "id": self.admin.id,
                "username": "admin",
                "role": "Admin",
                "full_name": "Admin",
            },
        )

    def test_missing_token_is_401(self):
        res = APIClient().get(self.url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data, {"error": "Unauthorized"})

    def test_tampered_token_is_401(self):
        token = str(issue_access_token(self.admin))
        forged = jwt.encode(
            {**jwt.decode(token, options={"verify_signature": False}), "role": "Admin", "userId": 999},
            "some-other-secret",
            algorithm="HS256",
        )
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {forged}")

        self.assertEqual(client.get(self.url).status_code, status.HTTP_401_UNAUTHORIZED)

    def test_expired_token_is_401(self):
        token = AccessToken.for_user(self.admin)
        token.set_exp(lifetime=-timedelta(minutes=1))

        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        self.assertEqual(client.get(self.url).status_code, status.HTTP_401_UNAUTHORIZED)
