# users/tests/test_user_management.py

from __future__ import annotations

from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status

from common.testing import api_client_for, create_admin, create_cashier

User = get_user_model()


class UserManagementTests(TestCase):
    """
    GUARANTEES:
    - Only admins manage accounts
    - Passwords shorter than 8 characters are rejected
    - Usernames are unique case-insensitively
    - An admin cannot delete their own account
    """

    def setUp(self):
        self.admin = create_admin()
        self.cashier = create_cashier()
        self.client = api_client_for(self.admin)
        self.list_url = reverse("staff:user-list")

    def _payload(self, **overrides):
        payload = {
            "username": "newcashier",
            "password": "longenough",
            "full_name": "New Cashier",
            "role": "Cashier",
        }
        payload.update(overrides)
        return payload

    def test_list_is_ordered_by_username_and_hides_passwords(self):
        res = self.client.get(self.list_url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([u["username"] for u in res.data], ["admin", "cashier1"])
        self.assertNotIn("password", res.data[0])

    def test_create_user(self):
        res = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        user = User.objects.get(username="newcashier")
        self.assertTrue(user.check_password("longenough"))
        self.assertEqual(user.role, "Cashier")

    def test_short_password_rejected(self):
        res = self.client.post(self.list_url, self._payload(password="short"), format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(User.objects.filter(username="newcashier").exists())

    def test_mismatched_confirmation_rejected(self):
        res = self.client.post(
            self.list_url, self._payload(confirm_password="different1"), format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_duplicate_username_is_case_insensitive(self):
        res = self.client.post(self.list_url, self._payload(username="CASHIER1"), format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"], "Username already exists.")

    def test_unknown_role_rejected(self):
        res = self.client.post(self.list_url, self._payload(role="Manager"), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_user(self):
        url = reverse("staff:user-detail", args=[self.cashier.id])
        res = self.client.delete(url)

        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(id=self.cashier.id).exists())

    def test_delete_unknown_user_is_404(self):
        res = self.client.delete(reverse("staff:user-detail", args=[999999]))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_cannot_delete_self(self):
        res = self.client.delete(reverse("staff:user-detail", args=[self.admin.id]))

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertTrue(User.objects.filter(id=self.admin.id).exists())

    def test_cashier_is_forbidden(self):
        client = api_client_for(self.cashier)

        self.assertEqual(client.get(self.list_url).status_code, status.HTTP_403_FORBIDDEN)
        res = client.post(self.list_url, self._payload(), format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(res.data, {"error": "Forbidden: insufficient permissions."})


class SeedUsersCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_users", stdout=StringIO())
        call_command("seed_users", stdout=StringIO())

        self.assertEqual(User.objects.count(), 2)
        admin = User.objects.get(username="admin")
        self.assertEqual(admin.role, "Admin")
        self.assertTrue(admin.check_password("admin123!"))
        self.assertEqual(User.objects.get(username="cashier1").role, "Cashier")
