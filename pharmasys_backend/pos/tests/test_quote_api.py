# pos/tests/test_quote_api.py

from __future__ import annotations

from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from common.testing import api_client_for, create_cashier
from products.models import Batch
from products.tests.factories import make_batch, make_product


class QuoteAPITests(TestCase):
    """
    GUARANTEES:
    - Quote assigns FEFO batches and computes totals
    - Nothing is written
    """

    def setUp(self):
        today = timezone.localdate()
        self.client = api_client_for(create_cashier())
        self.url = reverse("pos:quote")

        self.product = make_product(unit_price="2.00")
        self.later = make_batch(self.product, lot="LATER", expiry=today + timedelta(days=200), qty=10)
        self.sooner = make_batch(self.product, lot="SOONER", expiry=today + timedelta(days=20), qty=10)

    def test_quote(self):
        res = self.client.post(
            self.url,
            {
                "lines": [{"product_id": self.product.id, "qty": 4}],
                "payment_method": "Cash",
                "cash_received": "10.00",
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["lines"][0]["batch_id"], self.sooner.id)
        self.assertEqual(res.data["total"], "8.00")
        self.assertEqual(res.data["change_due"], "2.00")
        self.assertEqual(Batch.objects.get(id=self.sooner.id).qty_on_hand, 10)

    def test_quote_out_of_stock_is_409(self):
        res = self.client.post(
            self.url, {"lines": [{"product_id": self.product.id, "qty": 11}]}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)

    def test_empty_lines_rejected(self):
        res = self.client.post(self.url, {"lines": []}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
