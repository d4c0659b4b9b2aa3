# sales/services/void.py

"""
VOID SERVICE

Completed -> Voided, restoring every line's quantity to the batch it
came from and recording each restoration as an Adjustment.
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from common.exceptions import NotFoundError, ValidationError
from products.models import Adjustment, Batch
from products.services._parsing import clean_text, to_int
from sales.models import Sale
from sales.services.sale_lifecycle import validate_transition

logger = logging.getLogger(__name__)


@transaction.atomic
def void_sale(*, sale_id, reason, user) -> Sale:
    sale_id = to_int(sale_id, field_name="sale_id")
    reason = clean_text(reason)
    if not reason:
        raise ValidationError("reason is required")

    sale = Sale.objects.select_for_update().filter(pk=sale_id).first()
    if sale is None:
        raise NotFoundError("Sale not found.")

    validate_transition(sale=sale, target_status=Sale.Status.VOIDED)

    actor = getattr(user, "username", None) or "system"
    lines = list(sale.lines.select_related("product", "batch").order_by("batch_id", "id"))

    for line in lines:
        Batch.objects.filter(pk=line.batch_id).update(qty_on_hand=F("qty_on_hand") + line.qty)
        Adjustment.objects.create(
            created_by=actor,
            product=line.product,
            batch=line.batch,
            delta=line.qty,
            reason=f"Void of sale #{sale.id}: {reason}",
        )

    sale.status = Sale.Status.VOIDED
    sale.voided_at = timezone.now()
    sale.void_reason = reason
    sale.save(update_fields=["status", "voided_at", "void_reason"])

    logger.info(
        "Sale voided",
        extra={"sale_id": sale.id, "user": actor, "lines": len(lines)},
    )
    return sale
