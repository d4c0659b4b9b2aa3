# products/services/classification.py

"""
STOCK / EXPIRY CLASSIFICATION (PURE RULES)

No ORM access: callers pass dates, quantities and a Thresholds snapshot
(configuration.registry.Thresholds) and get plain values back.

Rules:
- is_expired      = expiry present AND expiry < today
- is_near_expiry  = expiry present AND NOT expired AND expiry <= today + near_expiry_days
- is_low_stock    = total_qty_on_hand <= low_stock_threshold (zero counts as low)
- batch status    = first match of:
                    Out of Stock, Low Stock, Expired, Near Expiry, In Stock

Comparisons are date-only; datetimes are reduced to their date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional


@dataclass(frozen=True)
class BatchClassification:
    is_expired: bool
    is_near_expiry: bool


@dataclass(frozen=True)
class ProductClassification:
    total_qty_on_hand: int
    is_low_stock: bool


@dataclass(frozen=True)
class BatchStatus:
    label: str
    severity: str


STATUS_OUT_OF_STOCK = BatchStatus("Out of Stock", "danger")
STATUS_LOW_STOCK = BatchStatus("Low Stock", "warning")
STATUS_EXPIRED = BatchStatus("Expired", "danger")
STATUS_NEAR_EXPIRY = BatchStatus("Near Expiry", "warning")
STATUS_IN_STOCK = BatchStatus("In Stock", "success")


def as_date(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


def classify_batch(expiry, today, near_expiry_days: int) -> BatchClassification:
    expiry = as_date(expiry)
    today = as_date(today)

    if expiry is None:
        return BatchClassification(is_expired=False, is_near_expiry=False)

    is_expired = expiry < today
    is_near_expiry = (not is_expired) and expiry <= today + timedelta(days=int(near_expiry_days))
    return BatchClassification(is_expired=is_expired, is_near_expiry=is_near_expiry)


def is_expired(expiry, today) -> bool:
    expiry = as_date(expiry)
    return expiry is not None and expiry < as_date(today)


def classify_product(quantities: Iterable[int], low_stock_threshold: int) -> ProductClassification:
    total = sum(int(q or 0) for q in quantities)
    return ProductClassification(
        total_qty_on_hand=total,
        is_low_stock=total <= int(low_stock_threshold),
    )


def batch_status(qty_on_hand: int, expiry, today, thresholds) -> BatchStatus:
    qty = int(qty_on_hand or 0)

    if qty <= 0:
        return STATUS_OUT_OF_STOCK
    if qty <= thresholds.low_stock_threshold:
        return STATUS_LOW_STOCK

    flags = classify_batch(expiry, today, thresholds.near_expiry_days)
    if flags.is_expired:
        return STATUS_EXPIRED
    if flags.is_near_expiry:
        return STATUS_NEAR_EXPIRY
    return STATUS_IN_STOCK
