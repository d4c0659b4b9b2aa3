# products/services/inventory.py

"""
======================================================
PATH: products/services/inventory.py
======================================================
INVENTORY READ MODELS

Purpose:
- Product overview: products + nested batches + derived stock flags.
- Flat batch rows with a status label (inventory page / CSV export).

Derived values come from products.services.classification using ONE
Thresholds snapshot passed in by the caller.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import Iterable

from django.db.models import F, Prefetch

from products.models import Batch, Product
from products.services.classification import (
    BatchStatus,
    batch_status,
    classify_batch,
    classify_product,
)

EXPORT_HEADER = ["Product", "Code", "Lot", "Expiry", "Qty On Hand", "Status"]


@dataclass(frozen=True)
class BatchView:
    batch: Batch
    is_expired: bool
    is_near_expiry: bool
    status: BatchStatus


@dataclass(frozen=True)
class ProductInventory:
    product: Product
    batches: list[BatchView]
    total_qty_on_hand: int
    is_low_stock: bool


def expiry_ordering():
    """Expiry ascending, undated last, batch id as tie-break."""
    return [F("expiry").asc(nulls_last=True), "id"]


def describe_batch(batch: Batch, *, today, thresholds) -> BatchView:
    flags = classify_batch(batch.expiry, today, thresholds.near_expiry_days)
    return BatchView(
        batch=batch,
        is_expired=flags.is_expired,
        is_near_expiry=flags.is_near_expiry,
        status=batch_status(batch.qty_on_hand, batch.expiry, today, thresholds),
    )


def inventory_overview(*, today, thresholds) -> list[ProductInventory]:
    products = Product.objects.order_by("name", "id").prefetch_related(
        Prefetch("batches", queryset=Batch.objects.order_by(*expiry_ordering()))
    )

    overview = []
    for product in products:
        batches = list(product.batches.all())
        summary = classify_product((b.qty_on_hand for b in batches), thresholds.low_stock_threshold)
        overview.append(
            ProductInventory(
                product=product,
                batches=[describe_batch(b, today=today, thresholds=thresholds) for b in batches],
                total_qty_on_hand=summary.total_qty_on_hand,
                is_low_stock=summary.is_low_stock,
            )
        )
    return overview


def batch_rows(batches: Iterable[Batch], *, today, thresholds) -> list[BatchView]:
    return [describe_batch(b, today=today, thresholds=thresholds) for b in batches]


def write_batches_csv(rows: Iterable[BatchView], stream) -> None:
    writer = csv.writer(stream)
    writer.writerow(EXPORT_HEADER)
    for row in rows:
        batch = row.batch
        writer.writerow(
            [
                batch.product.name,
                batch.product.code_value,
                batch.lot,
                batch.expiry.isoformat() if batch.expiry else "",
                batch.qty_on_hand,
                row.status.label,
            ]
        )
