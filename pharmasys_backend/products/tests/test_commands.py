# products/tests/test_commands.py

from __future__ import annotations

from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.utils import timezone

from products.models import Adjustment, Batch, Product


class SeedDemoInventoryTests(TestCase):
    def test_seeds_demo_lots_once(self):
        call_command("seed_demo_inventory", stdout=StringIO())
        out = StringIO()
        call_command("seed_demo_inventory", stdout=out)

        self.assertEqual(
            set(Product.objects.values_list("name", flat=True)),
            {"Amoxicillin", "Paracetamol"},
        )
        self.assertEqual(Batch.objects.count(), 4)
        self.assertEqual(Adjustment.objects.count(), 4)
        self.assertIn("0 new batches", out.getvalue())

    def test_demo_lots_cover_each_stock_state(self):
        call_command("seed_demo_inventory", stdout=StringIO())
        today = timezone.localdate()

        self.assertEqual(Batch.objects.get(lot="TBATCH1").qty_on_hand, 5)
        self.assertLess(Batch.objects.get(lot="TBATCH3").expiry, today)
        self.assertLessEqual((Batch.objects.get(lot="TBATCH2").expiry - today).days, 90)
        self.assertEqual(Product.objects.get(code_value="99906000123456").unit_price, Decimal("3.50"))
