# products/services/fefo.py

"""
FEFO BATCH SELECTOR (FIRST-EXPIRY-FIRST-OUT)

Eligible batches: same product, qty_on_hand > 0, not expired.
Order: expiry ascending, undated batches after every dated one,
ties broken by batch id ascending (deterministic, reproducible).

Works on Batch instances or any object exposing
id / product_id / expiry / qty_on_hand.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from products.services.classification import as_date, is_expired


def fefo_sort_key(batch):
    expiry = as_date(batch.expiry)
    return (expiry is None, expiry or date.min, batch.id)


def eligible_batches(product_id, batches: Iterable, today) -> list:
    candidates = [
        b
        for b in batches
        if b.product_id == product_id
        and int(b.qty_on_hand or 0) > 0
        and not is_expired(b.expiry, today)
    ]
    return sorted(candidates, key=fefo_sort_key)


def select_batch_for_sale(product_id, batches: Iterable, today) -> Optional[object]:
    ordered = eligible_batches(product_id, batches, today)
    return ordered[0] if ordered else None
