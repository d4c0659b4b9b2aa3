# common/tests/test_routes.py

from __future__ import annotations

from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from common.testing import api_client_for, create_admin, create_cashier
from configuration.registry import registry
from products.tests.factories import make_batch, make_product
from sales.tests.factories import checkout


class TrailingSlashRouteTests(TestCase):
    """
    GUARANTEES:
    - Documented paths resolve exactly as written (no slash)
    - The trailing-slash form resolves too, with no redirect
    """

    def setUp(self):
        registry.invalidate()
        self.admin = create_admin(password="admin-pass-1")
        self.admin_client = api_client_for(self.admin)

    def tearDown(self):
        registry.invalidate()

    def test_login_without_slash(self):
        for path in ("/api/auth/login", "/api/auth/login/"):
            with self.subTest(path=path):
                res = APIClient().post(path, {"username": "admin", "password": "admin-pass-1"}, format="json")
                self.assertEqual(res.status_code, status.HTTP_200_OK)
                self.assertIn("token", res.data)

    def test_receive_without_slash(self):
        payload = {
            "code_value": "99906000123456",
            "name": "Amoxicillin",
            "lot": "L001X",
            "expiry": (timezone.localdate() + timedelta(days=365)).isoformat(),
            "qty": 100,
            "unit_cost": "2.50",
        }
        res = self.admin_client.post("/api/receive", payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["qty_on_hand"], 100)

    def test_adjust_and_void_without_slash(self):
        product = make_product(unit_price="2.00")
        batch = make_batch(product, qty=10)

        res = self.admin_client.post(
            "/api/adjustments", {"batch_id": batch.id, "new_qty": 12, "reason": "Count"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)

        sale = checkout(create_cashier(), (product, 1))
        res = self.admin_client.post(f"/api/sales/{sale.id}/void", {"reason": "Test"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_read_paths_resolve_both_ways(self):
        paths = [
            "/api/auth/me",
            "/api/users",
            "/api/settings",
            "/api/products",
            "/api/inventory",
            "/api/inventory/batches",
            "/api/adjustments",
            "/api/dashboard",
            "/api/pos/batches",
            "/api/sales",
            "/api/health",
        ]
        for path in paths:
            for candidate in (path, path + "/"):
                with self.subTest(path=candidate):
                    res = self.admin_client.get(candidate)
                    self.assertEqual(res.status_code, status.HTTP_200_OK)

    def test_reverse_gives_documented_path(self):
        self.assertEqual(reverse("users:login"), "/api/auth/login")
        self.assertEqual(reverse("products:receive"), "/api/receive")
        self.assertEqual(reverse("sales:checkout"), "/api/sales/checkout")
        self.assertEqual(reverse("staff:user-detail", args=[3]), "/api/users/3")
