# configuration/tests/test_settings.py

from __future__ import annotations

from django.test import TestCase
from django.urls import reverse
from rest_framework import status

from common.exceptions import ValidationError
from common.testing import api_client_for, create_admin, create_cashier
from configuration.models import Setting
from configuration.registry import Thresholds, registry
from configuration.services import update_settings, validate_settings_values


class SettingsRegistryTests(TestCase):
    """
    GUARANTEES:
    - Defaults are seeded by migration (10 / 90)
    - Snapshots are cached until reload() / invalidate()
    - Invalid stored values fall back to defaults
    """

    def setUp(self):
        registry.invalidate()

    def tearDown(self):
        registry.invalidate()

    def test_seeded_defaults(self):
        self.assertEqual(registry.snapshot(), Thresholds(low_stock_threshold=10, near_expiry_days=90))

    def test_snapshot_is_cached_until_reload(self):
        registry.snapshot()
        Setting.objects.filter(key="LowStockThreshold").update(value="25")

        self.assertEqual(registry.snapshot().low_stock_threshold, 10)
        self.assertEqual(registry.reload().low_stock_threshold, 25)
        self.assertEqual(registry.snapshot().low_stock_threshold, 25)

    def test_invalid_stored_value_falls_back_to_default(self):
        Setting.objects.filter(key="NearExpiryDays").update(value="soon")
        self.assertEqual(registry.reload().near_expiry_days, 90)

    def test_update_settings_reloads_snapshot(self):
        thresholds = update_settings(values={"NearExpiryDays": 30})

        self.assertEqual(thresholds.near_expiry_days, 30)
        self.assertEqual(registry.snapshot().near_expiry_days, 30)
        self.assertEqual(Setting.objects.get(key="NearExpiryDays").value, "30")

    def test_validation_never_coerces(self):
        for bad in ({"LowStockThreshold": 0}, {"LowStockThreshold": -3},
                    {"LowStockThreshold": "abc"}, {"Unknown": 5}, {}):
            with self.assertRaises(ValidationError):
                validate_settings_values(bad)


class SettingsAPITests(TestCase):
    def setUp(self):
        registry.invalidate()
        self.admin = create_admin()
        self.cashier = create_cashier()
        self.url = reverse("configuration:settings")

    def tearDown(self):
        registry.invalidate()

    def test_cashier_can_read(self):
        res = api_client_for(self.cashier).get(self.url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"LowStockThreshold": 10, "NearExpiryDays": 90})

    def test_cashier_cannot_update(self):
        res = api_client_for(self.cashier).put(self.url, {"LowStockThreshold": 5}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_updates(self):
        res = api_client_for(self.admin).put(
            self.url, {"LowStockThreshold": 5, "NearExpiryDays": 60}, format="json"
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"LowStockThreshold": 5, "NearExpiryDays": 60})

    def test_non_positive_and_non_numeric_rejected(self):
        client = api_client_for(self.admin)

        for payload in ({"LowStockThreshold": 0}, {"NearExpiryDays": "ninety"}, {"Other": 1}):
            res = client.put(self.url, payload, format="json")
            self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST, payload)

        self.assertEqual(registry.reload(), Thresholds())
