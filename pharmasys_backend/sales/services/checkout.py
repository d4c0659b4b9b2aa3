# sales/services/checkout.py

"""
CHECKOUT SERVICE (ATOMIC)

Single entry point that turns a cart into a completed Sale.

Flow (one transaction):
1. Lock every candidate batch of the requested products (id order)
2. Rebuild the cart against the locked rows (FEFO + quantity checks)
3. Compute totals and settle the payment
4. Decrement each assigned batch with a guarded conditional update
5. Write Sale, SaleLines and one Issue per line

Any failure rolls back everything; no partial sale is ever stored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from common.exceptions import OutOfStockError, ValidationError
from pos.services.cart import Cart, CartTotals, Payment, build_cart, settle_payment
from products.models import Batch, Product
from sales.models import Issue, Sale, SaleLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    sale: Sale
    cart: Cart
    totals: CartTotals
    payment: Payment


def _decrement_batch(line) -> None:
    updated = Batch.objects.filter(
        pk=line.batch.pk,
        qty_on_hand__gte=line.qty,
    ).update(qty_on_hand=F("qty_on_hand") - line.qty)

    if updated != 1:
        raise OutOfStockError(
            f"Insufficient stock for {line.product.name} (lot {line.batch.lot})."
        )


@transaction.atomic
def complete_sale(
    *,
    lines,
    payment_method: str,
    user,
    cash_received=None,
    discount=Decimal("0.00"),
    tax=Decimal("0.00"),
    patient: str = "",
    notes: str = "",
    today=None,
) -> CheckoutResult:
    lines = list(lines or [])
    if not lines:
        raise ValidationError("Cart is empty.")

    today = today or timezone.localdate()
    product_ids = {line["product_id"] for line in lines}

    batches = list(
        Batch.objects.select_for_update()
        .filter(product_id__in=product_ids)
        .order_by("id")
    )
    products = Product.objects.in_bulk(product_ids)

    cart = build_cart(lines, products=products, batches=batches, today=today)
    totals = cart.totals(discount=discount, tax=tax)
    payment = settle_payment(totals, payment_method, cash_received)

    for line in cart.lines:
        _decrement_batch(line)

    cashier = getattr(user, "username", None) or "system"
    patient = (patient or "").strip()

    sale = Sale.objects.create(
        created_by=cashier,
        patient=patient,
        subtotal=totals.subtotal,
        discount=totals.discount,
        tax=totals.tax,
        total=totals.total,
        payment_method=payment.method,
        cash_received=payment.cash_received,
        change_due=payment.change_due,
        notes=(notes or "").strip(),
    )

    for line in cart.lines:
        SaleLine.objects.create(
            sale=sale,
            product=line.product,
            batch=line.batch,
            qty=line.qty,
            unit_price=line.unit_price,
            line_total=line.line_total,
        )
        Issue.objects.create(
            created_by=cashier,
            product=line.product,
            batch=line.batch,
            qty=line.qty,
            patient=patient,
            sale=sale,
        )

    logger.info(
        "Sale completed",
        extra={
            "sale_id": sale.id,
            "user": cashier,
            "total": str(sale.total),
            "lines": len(cart.lines),
        },
    )

    return CheckoutResult(sale=sale, cart=cart, totals=totals, payment=payment)
