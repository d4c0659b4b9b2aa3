# products/services/stock_intake.py

"""
STOCK RECEIPT (APPLICATION SERVICE)

Purpose:
- Receive a delivered lot against a product identified by code_value.
- Create the product on first sight; afterwards its stored fields win.
- Record the receipt in the Adjustment audit log.

Writes (one atomic unit):
    Product (only when new) -> Batch -> Adjustment(+qty, "Initial stock receipt")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from django.db import transaction

from common.exceptions import ValidationError
from products.models import Adjustment, Batch, Product
from products.services._parsing import clean_text, is_blank, to_date, to_int, to_money

logger = logging.getLogger(__name__)

RECEIPT_REASON = "Initial stock receipt"


@dataclass(frozen=True)
class ReceiveResult:
    product: Product
    batch: Batch
    adjustment: Adjustment
    product_created: bool


def _acting_username(user) -> str:
    return getattr(user, "username", None) or "system"


@transaction.atomic
def receive_stock(
    *,
    code_value,
    lot,
    expiry,
    qty,
    unit_cost,
    user=None,
    code_type=None,
    name=None,
    strength=None,
    form=None,
    pack_size=None,
    uom=None,
    unit_price=None,
) -> ReceiveResult:
    # ---------------- validate (before any write) ----------------
    code_value = clean_text(code_value)
    lot = clean_text(lot)

    if not code_value:
        raise ValidationError("code_value is required")
    if not lot:
        raise ValidationError("lot is required")

    expiry = to_date(expiry, field_name="expiry")

    qty = to_int(qty, field_name="qty")
    if qty < 1:
        raise ValidationError("qty must be at least 1")

    unit_cost = to_money(unit_cost, field_name="unit_cost")
    if unit_cost < Decimal("0.00"):
        raise ValidationError("unit_cost cannot be negative")

    # ---------------- product upsert ----------------
    product = Product.objects.select_for_update().filter(code_value=code_value).first()
    product_created = product is None

    if product_created:
        name = clean_text(name)
        if not name:
            raise ValidationError("name is required for a new product")

        code_type = clean_text(code_type) or Product.CodeType.INTERNAL_SKU
        if code_type not in Product.CodeType.values:
            raise ValidationError(
                f"code_type must be one of: {', '.join(Product.CodeType.values)}"
            )

        price = to_money(unit_price, field_name="unit_price", required=False)
        if price is not None and price < Decimal("0.00"):
            raise ValidationError("unit_price cannot be negative")

        product = Product.objects.create(
            code_type=code_type,
            code_value=code_value,
            name=name,
            strength=clean_text(strength),
            form=clean_text(form),
            pack_size=clean_text(pack_size),
            uom=clean_text(uom),
            unit_price=price,
            unit_cost=unit_cost,
        )
    elif not all(is_blank(v) for v in (name, strength, form, pack_size, uom, unit_price)):
        logger.debug(
            "Ignoring product fields for existing product",
            extra={"product_id": product.id, "code_value": code_value},
        )

    # ---------------- batch + audit ----------------
    batch = Batch.objects.create(
        product=product,
        lot=lot,
        expiry=expiry,
        qty_on_hand=qty,
        unit_cost=unit_cost,
    )

    adjustment = Adjustment.objects.create(
        created_by=_acting_username(user),
        product=product,
        batch=batch,
        delta=qty,
        reason=RECEIPT_REASON,
    )

    logger.info(
        "Stock received",
        extra={
            "product_id": product.id,
            "batch_id": batch.id,
            "qty": qty,
            "product_created": product_created,
            "received_by": _acting_username(user),
        },
    )

    return ReceiveResult(
        product=product,
        batch=batch,
        adjustment=adjustment,
        product_created=product_created,
    )
