# products/management/commands/seed_demo_inventory.py

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from products.models import Batch
from products.services import receive_stock

AMOXICILLIN = {
    "code_type": "GTIN",
    "code_value": "99906000123456",
    "name": "Amoxicillin",
    "strength": "500mg",
    "form": "Capsule",
    "pack_size": "100",
    "uom": "Capsule",
    "unit_price": Decimal("3.50"),
}

PARACETAMOL = {
    "code_type": "GTIN",
    "code_value": "99906000123457",
    "name": "Paracetamol",
    "strength": "500mg",
    "form": "Tablet",
    "pack_size": "100",
    "uom": "Tablet",
    "unit_price": Decimal("2.00"),
}


def demo_receipts(today: date) -> list[dict]:
    return [
        {**AMOXICILLIN, "lot": "L001X", "expiry": today + timedelta(days=365), "qty": 100, "unit_cost": Decimal("2.50")},
        # low stock
        {**PARACETAMOL, "lot": "TBATCH1", "expiry": today + timedelta(days=240), "qty": 5, "unit_cost": Decimal("1.50")},
        # near expiry
        {**PARACETAMOL, "lot": "TBATCH2", "expiry": today + timedelta(days=30), "qty": 50, "unit_cost": Decimal("1.50")},
        # expired
        {**PARACETAMOL, "lot": "TBATCH3", "expiry": date(2022, 1, 1), "qty": 20, "unit_cost": Decimal("1.40")},
    ]


class Command(BaseCommand):
    help = "Seed demo products and batches (includes low-stock, near-expiry and expired lots). Idempotent."

    @transaction.atomic
    def handle(self, *args, **options):
        created = 0

        for receipt in demo_receipts(timezone.localdate()):
            exists = Batch.objects.filter(
                product__code_value=receipt["code_value"],
                lot=receipt["lot"],
            ).exists()
            if exists:
                self.stdout.write(f"exists:  {receipt['name']} lot {receipt['lot']}")
                continue

            receive_stock(**receipt)
            created += 1
            self.stdout.write(f"created: {receipt['name']} lot {receipt['lot']} x{receipt['qty']}")

        self.stdout.write(self.style.SUCCESS(f"Demo inventory ready ({created} new batches)."))
