# products/services/stock_adjustments.py

"""
STOCK ADJUSTMENTS SERVICE

Purpose:
- Set a batch's counted quantity (stock-take correction).
- Record the signed difference in the Adjustment audit log.
- Keep Batch.qty_on_hand service-managed only.

Rules:
- new_qty must be an integer >= 0; reason must be non-blank
- new_qty == current qty -> no writes, result.changed is False
- the batch row is locked for the read-compute-write
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import transaction

from common.exceptions import NotFoundError, ValidationError
from products.models import Adjustment, Batch
from products.services._parsing import clean_text, to_int

logger = logging.getLogger(__name__)

NO_CHANGE_MESSAGE = "No change in quantity."


@dataclass(frozen=True)
class AdjustmentResult:
    batch: Batch
    adjustment: Optional[Adjustment]
    delta: int
    changed: bool


@transaction.atomic
def adjust_batch_quantity(
    *,
    batch_id,
    new_qty,
    reason,
    user=None,
) -> AdjustmentResult:
    batch_id = to_int(batch_id, field_name="batch_id")
    new_qty = to_int(new_qty, field_name="new_qty")
    if new_qty < 0:
        raise ValidationError("new_qty cannot be negative")

    reason = clean_text(reason)
    if not reason:
        raise ValidationError("reason is required")

    batch = (
        Batch.objects.select_for_update(of=("self",))
        .select_related("product")
        .filter(pk=batch_id)
        .first()
    )
    if batch is None:
        raise NotFoundError("Batch not found.")

    delta = new_qty - int(batch.qty_on_hand)

    if delta == 0:
        return AdjustmentResult(batch=batch, adjustment=None, delta=0, changed=False)

    batch.qty_on_hand = new_qty
    batch.save(update_fields=["qty_on_hand"])

    adjustment = Adjustment.objects.create(
        created_by=getattr(user, "username", None) or "system",
        product=batch.product,
        batch=batch,
        delta=delta,
        reason=reason,
    )

    logger.info(
        "Stock adjusted",
        extra={
            "batch_id": batch.id,
            "product_id": batch.product_id,
            "delta": delta,
            "new_qty": new_qty,
            "adjusted_by": adjustment.created_by,
        },
    )

    return AdjustmentResult(batch=batch, adjustment=adjustment, delta=delta, changed=True)
