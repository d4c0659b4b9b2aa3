# products/tests/test_classification.py

from __future__ import annotations

from datetime import date, datetime, timedelta
from types import SimpleNamespace

from django.test import SimpleTestCase

from configuration.registry import Thresholds
from products.services.classification import (
    STATUS_EXPIRED,
    STATUS_IN_STOCK,
    STATUS_LOW_STOCK,
    STATUS_NEAR_EXPIRY,
    STATUS_OUT_OF_STOCK,
    batch_status,
    classify_batch,
    classify_product,
)
from products.services.fefo import select_batch_for_sale

TODAY = date(2025, 1, 15)


class ClassifyBatchTests(SimpleTestCase):
    """
    GUARANTEES:
    - Past expiry is expired and never near-expiry
    - No expiry is neither
    - Near-expiry window is inclusive and date-only
    """

    def test_past_expiry_is_expired_not_near(self):
        for days_ago in (1, 30, 800):
            flags = classify_batch(TODAY - timedelta(days=days_ago), TODAY, 90)
            self.assertTrue(flags.is_expired)
            self.assertFalse(flags.is_near_expiry)

    def test_no_expiry_is_never_flagged(self):
        flags = classify_batch(None, TODAY, 90)
        self.assertFalse(flags.is_expired)
        self.assertFalse(flags.is_near_expiry)

    def test_expiring_today_is_near_not_expired(self):
        flags = classify_batch(TODAY, TODAY, 90)
        self.assertFalse(flags.is_expired)
        self.assertTrue(flags.is_near_expiry)

    def test_window_boundary_is_inclusive(self):
        self.assertTrue(classify_batch(TODAY + timedelta(days=90), TODAY, 90).is_near_expiry)
        self.assertFalse(classify_batch(TODAY + timedelta(days=91), TODAY, 90).is_near_expiry)

    def test_time_of_day_is_ignored(self):
        late_today = datetime(2025, 1, 15, 23, 59)
        flags = classify_batch(TODAY, late_today, 90)
        self.assertFalse(flags.is_expired)


class ClassifyProductTests(SimpleTestCase):
    def test_threshold_is_inclusive(self):
        at = classify_product([4, 6], 10)
        above = classify_product([5, 6], 10)

        self.assertEqual(at.total_qty_on_hand, 10)
        self.assertTrue(at.is_low_stock)
        self.assertFalse(above.is_low_stock)

    def test_zero_stock_is_low_stock(self):
        self.assertTrue(classify_product([], 10).is_low_stock)
        self.assertTrue(classify_product([0, 0], 10).is_low_stock)


class BatchStatusTests(SimpleTestCase):
    def setUp(self):
        self.thresholds = Thresholds(low_stock_threshold=10, near_expiry_days=90)

    def test_status_precedence(self):
        expired = TODAY - timedelta(days=1)
        near = TODAY + timedelta(days=10)
        far = TODAY + timedelta(days=365)

        self.assertEqual(batch_status(0, expired, TODAY, self.thresholds), STATUS_OUT_OF_STOCK)
        self.assertEqual(batch_status(5, expired, TODAY, self.thresholds), STATUS_LOW_STOCK)
        self.assertEqual(batch_status(50, expired, TODAY, self.thresholds), STATUS_EXPIRED)
        self.assertEqual(batch_status(50, near, TODAY, self.thresholds), STATUS_NEAR_EXPIRY)
        self.assertEqual(batch_status(50, far, TODAY, self.thresholds), STATUS_IN_STOCK)
        self.assertEqual(batch_status(50, None, TODAY, self.thresholds), STATUS_IN_STOCK)
        self.assertEqual(STATUS_OUT_OF_STOCK.severity, "danger")


def _batch(id, expiry, qty=10, product_id=1):
    return SimpleNamespace(id=id, product_id=product_id, expiry=expiry, qty_on_hand=qty)


class FefoSelectorTests(SimpleTestCase):
    """
    GUARANTEES:
    - Never returns an expired or zero-quantity batch
    - Earliest expiry wins; undated batches come last
    - Equal expiry resolves by batch id ascending
    """

    def setUp(self):
        self.today = date(2024, 12, 1)

    def test_earliest_expiry_wins(self):
        batches = [_batch(1, date(2025, 8, 15)), _batch(2, date(2025, 1, 31))]
        self.assertEqual(select_batch_for_sale(1, batches, self.today).id, 2)

    def test_dated_batch_preferred_over_undated(self):
        batches = [_batch(1, None), _batch(2, date(2026, 1, 1))]
        self.assertEqual(select_batch_for_sale(1, batches, self.today).id, 2)

    def test_skips_expired_and_empty(self):
        batches = [
            _batch(1, date(2024, 1, 1)),
            _batch(2, date(2025, 1, 1), qty=0),
            _batch(3, date(2025, 6, 1)),
        ]
        self.assertEqual(select_batch_for_sale(1, batches, self.today).id, 3)

    def test_none_when_nothing_eligible(self):
        batches = [_batch(1, date(2024, 1, 1)), _batch(2, None, qty=0)]
        self.assertIsNone(select_batch_for_sale(1, batches, self.today))

    def test_other_products_ignored(self):
        batches = [_batch(1, date(2025, 1, 1), product_id=2)]
        self.assertIsNone(select_batch_for_sale(1, batches, self.today))

    def test_tie_break_by_id_is_stable(self):
        batches = [_batch(9, date(2025, 3, 1)), _batch(4, date(2025, 3, 1))]
        self.assertEqual(select_batch_for_sale(1, batches, self.today).id, 4)
        self.assertEqual(select_batch_for_sale(1, list(reversed(batches)), self.today).id, 4)
