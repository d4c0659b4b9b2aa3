# products/tests/test_stock.py

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import TestCase

from common.exceptions import NotFoundError, ValidationError
from common.testing import create_admin
from products.models import Adjustment, Batch, Product
from products.services import adjust_batch_quantity, receive_stock
from products.tests.factories import make_batch, make_product


class ReceiveStockTests(TestCase):
    """
    GUARANTEES:
    - Unseen code_value -> one Product, one Batch, one Adjustment(+qty)
    - Known code_value -> existing product fields win
    - Any failure rolls back every write
    """

    def setUp(self):
        self.admin = create_admin()

    def _receive(self, **overrides):
        payload = {
            "code_value": "99906000123456",
            "name": "Amoxicillin",
            "lot": "L001X",
            "expiry": date(2026, 1, 31),
            "qty": 100,
            "unit_cost": Decimal("2.50"),
            "user": self.admin,
        }
        payload.update(overrides)
        return receive_stock(**payload)

    def test_new_product_creates_three_rows(self):
        result = self._receive(unit_price=Decimal("3.50"))

        self.assertTrue(result.product_created)
        self.assertEqual(Product.objects.count(), 1)
        self.assertEqual(Batch.objects.count(), 1)
        self.assertEqual(Adjustment.objects.count(), 1)

        self.assertEqual(result.product.code_type, Product.CodeType.INTERNAL_SKU)
        self.assertEqual(result.product.unit_cost, Decimal("2.50"))
        self.assertEqual(result.batch.qty_on_hand, 100)
        self.assertEqual(result.adjustment.delta, 100)
        self.assertEqual(result.adjustment.reason, "Initial stock receipt")
        self.assertEqual(result.adjustment.created_by, "admin")

    def test_existing_product_fields_are_authoritative(self):
        self._receive()
        result = self._receive(lot="L002X", name="Renamed", strength="1g", unit_price="9.99")

        self.assertFalse(result.product_created)
        self.assertEqual(Product.objects.count(), 1)
        self.assertEqual(Batch.objects.count(), 2)
        self.assertEqual(Adjustment.objects.count(), 2)

        product = Product.objects.get()
        self.assertEqual(product.name, "Amoxicillin")
        self.assertEqual(product.strength, "")
        self.assertIsNone(product.unit_price)

    def test_missing_or_malformed_fields_rejected_without_writes(self):
        bad_inputs = [
            {"code_value": ""},
            {"lot": "  "},
            {"expiry": None},
            {"expiry": "31/01/2026"},
            {"qty": None},
            {"qty": "ten"},
            {"qty": 0},
            {"unit_cost": None},
            {"unit_cost": "abc"},
            {"unit_cost": "-1"},
            {"name": ""},
            {"code_type": "Barcode"},
        ]
        for overrides in bad_inputs:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValidationError):
                    self._receive(**overrides)

        self.assertEqual(Product.objects.count(), 0)
        self.assertEqual(Batch.objects.count(), 0)
        self.assertEqual(Adjustment.objects.count(), 0)

    def test_failure_after_product_insert_rolls_back(self):
        with mock.patch(
            "products.services.stock_intake.Adjustment.objects.create",
            side_effect=RuntimeError("disk full"),
        ):
            with self.assertRaises(RuntimeError):
                self._receive()

        self.assertEqual(Product.objects.count(), 0)
        self.assertEqual(Batch.objects.count(), 0)


class AdjustBatchQuantityTests(TestCase):
    """
    GUARANTEES:
    - Same quantity -> zero writes, "no change"
    - Different quantity -> batch updated + one signed Adjustment
    - Unknown batch -> NotFoundError, no writes
    """

    def setUp(self):
        self.admin = create_admin()
        self.product = make_product()
        self.batch = make_batch(self.product, qty=10)

    def test_no_change_writes_nothing(self):
        result = adjust_batch_quantity(batch_id=self.batch.id, new_qty=10, reason="Count", user=self.admin)

        self.assertFalse(result.changed)
        self.assertIsNone(result.adjustment)
        self.assertEqual(Adjustment.objects.count(), 0)

    def test_increase_records_positive_delta(self):
        result = adjust_batch_quantity(batch_id=self.batch.id, new_qty=15, reason="Found stock", user=self.admin)

        self.batch.refresh_from_db()
        self.assertEqual(self.batch.qty_on_hand, 15)
        self.assertEqual(result.delta, 5)

        adjustment = Adjustment.objects.get()
        self.assertEqual(adjustment.delta, 5)
        self.assertEqual(adjustment.batch_id, self.batch.id)
        self.assertEqual(adjustment.product_id, self.product.id)
        self.assertEqual(adjustment.created_by, "admin")

    def test_decrease_records_negative_delta(self):
        adjust_batch_quantity(batch_id=self.batch.id, new_qty=3, reason="Damaged", user=self.admin)
        self.assertEqual(Adjustment.objects.get().delta, -7)

    def test_only_the_batch_row_is_locked(self):
        with mock.patch.object(
            Batch.objects, "select_for_update", wraps=Batch.objects.select_for_update
        ) as locked:
            adjust_batch_quantity(batch_id=self.batch.id, new_qty=12, reason="Recount", user=self.admin)

        locked.assert_called_once_with(of=("self",))

    def test_unknown_batch(self):
        with self.assertRaises(NotFoundError):
            adjust_batch_quantity(batch_id=999999, new_qty=3, reason="Count", user=self.admin)
        self.assertEqual(Adjustment.objects.count(), 0)

    def test_invalid_input(self):
        for kwargs in ({"new_qty": -1, "reason": "x"}, {"new_qty": "abc", "reason": "x"},
                       {"new_qty": None, "reason": "x"}, {"new_qty": 5, "reason": "   "}):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValidationError):
                    adjust_batch_quantity(batch_id=self.batch.id, user=self.admin, **kwargs)

        self.batch.refresh_from_db()
        self.assertEqual(self.batch.qty_on_hand, 10)

    def test_adjustments_are_append_only(self):
        adjust_batch_quantity(batch_id=self.batch.id, new_qty=12, reason="Count", user=self.admin)
        adjustment = Adjustment.objects.get()

        adjustment.reason = "Edited"
        with self.assertRaises(DjangoValidationError):
            adjustment.save()
        with self.assertRaises(DjangoValidationError):
            adjustment.delete()
