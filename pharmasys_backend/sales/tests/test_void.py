# sales/tests/test_void.py

from __future__ import annotations

from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from common.exceptions import InvalidStateError, NotFoundError, ValidationError
from common.testing import api_client_for, create_admin, create_cashier
from products.models import Adjustment, Batch
from products.tests.factories import make_batch, make_product
from sales.models import Sale
from sales.services.sale_lifecycle import InvalidSaleTransitionError, can_transition
from sales.services.void import void_sale
from sales.tests.factories import checkout


class VoidServiceTests(TestCase):
    """
    GUARANTEES:
    - Voiding restores each line's quantity to its own batch
    - Each restoration is audited as an Adjustment
    - A sale can only be voided once
    """

    def setUp(self):
        today = timezone.localdate()
        self.admin = create_admin()
        self.cashier = create_cashier()
        self.product = make_product(unit_price="2.00")
        self.batch = make_batch(self.product, lot="A1", expiry=today + timedelta(days=60), qty=10)
        self.sale = checkout(self.cashier, (self.product, 4))

    def test_void_restores_stock(self):
        self.assertEqual(Batch.objects.get(id=self.batch.id).qty_on_hand, 6)

        sale = void_sale(sale_id=self.sale.id, reason="Wrong item", user=self.admin)

        self.assertEqual(sale.status, Sale.Status.VOIDED)
        self.assertIsNotNone(sale.voided_at)
        self.assertEqual(sale.void_reason, "Wrong item")
        self.assertEqual(Batch.objects.get(id=self.batch.id).qty_on_hand, 10)

        adjustment = Adjustment.objects.get(batch=self.batch)
        self.assertEqual(adjustment.delta, 4)
        self.assertEqual(adjustment.created_by, "admin")
        self.assertIn(f"#{self.sale.id}", adjustment.reason)

    def test_void_restores_every_batch_of_a_multi_line_sale(self):
        other = make_product(code_value="P-002", name="Ibuprofen", unit_price="1.00")
        other_batch = make_batch(other, lot="IBU", qty=8)
        second_lot = make_batch(self.product, lot="A2", qty=3)

        sale = checkout(
            self.cashier,
            (other, 5),
            {"product_id": self.product.id, "qty": 2, "batch_id": second_lot.id},
        )
        self.assertEqual(Batch.objects.get(id=other_batch.id).qty_on_hand, 3)
        self.assertEqual(Batch.objects.get(id=second_lot.id).qty_on_hand, 1)

        void_sale(sale_id=sale.id, reason="Wrong patient", user=self.admin)

        self.assertEqual(Batch.objects.get(id=other_batch.id).qty_on_hand, 8)
        self.assertEqual(Batch.objects.get(id=second_lot.id).qty_on_hand, 3)
        self.assertEqual(Batch.objects.get(id=self.batch.id).qty_on_hand, 6)

        restored = Adjustment.objects.filter(reason__startswith=f"Void of sale #{sale.id}:")
        self.assertEqual(
            sorted(restored.values_list("batch_id", "delta")),
            sorted([(other_batch.id, 5), (second_lot.id, 2)]),
        )

    def test_second_void_is_rejected(self):
        void_sale(sale_id=self.sale.id, reason="Mistake", user=self.admin)

        with self.assertRaisesMessage(InvalidSaleTransitionError, "already been voided"):
            void_sale(sale_id=self.sale.id, reason="Again", user=self.admin)

        self.assertEqual(Batch.objects.get(id=self.batch.id).qty_on_hand, 10)

    def test_reason_required(self):
        with self.assertRaises(ValidationError):
            void_sale(sale_id=self.sale.id, reason="   ", user=self.admin)

    def test_missing_sale(self):
        with self.assertRaises(NotFoundError):
            void_sale(sale_id=9999, reason="x", user=self.admin)


class SaleImmutabilityTests(TestCase):
    def setUp(self):
        product = make_product(unit_price="2.00")
        make_batch(product, lot="A1", qty=10)
        self.sale = checkout(create_cashier(), (product, 1))

    def test_totals_cannot_change(self):
        self.sale.total = "999.00"
        self.sale.subtotal = "999.00"
        with self.assertRaises(InvalidStateError):
            self.sale.save()

    def test_sales_cannot_be_deleted(self):
        with self.assertRaises(InvalidStateError):
            self.sale.delete()

    def test_transition_rules(self):
        self.assertTrue(can_transition(from_status=Sale.Status.COMPLETED, to_status=Sale.Status.VOIDED))
        self.assertFalse(can_transition(from_status=Sale.Status.VOIDED, to_status=Sale.Status.COMPLETED))
        self.assertFalse(can_transition(from_status=Sale.Status.VOIDED, to_status=Sale.Status.VOIDED))


class VoidAPITests(TestCase):
    def setUp(self):
        product = make_product(unit_price="2.00")
        make_batch(product, lot="A1", qty=10)
        self.cashier = create_cashier()
        self.sale = checkout(self.cashier, (product, 2))
        self.url = reverse("sales:sale-void", args=[self.sale.id])

    def test_admin_can_void(self):
        res = api_client_for(create_admin()).post(self.url, {"reason": "Customer returned"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "Voided")

    def test_cashier_cannot_void(self):
        res = api_client_for(self.cashier).post(self.url, {"reason": "Oops"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Sale.objects.get(id=self.sale.id).status, Sale.Status.COMPLETED)

    def test_void_twice_is_409(self):
        client = api_client_for(create_admin())
        client.post(self.url, {"reason": "First"}, format="json")

        res = client.post(self.url, {"reason": "Second"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)

    def test_missing_reason_is_400(self):
        res = api_client_for(create_admin()).post(self.url, {}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
