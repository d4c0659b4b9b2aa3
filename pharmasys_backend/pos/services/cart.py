# pos/services/cart.py

"""
POS CART (IN-MEMORY)

The cart mirrors the point-of-sale screen: ordered lines, each bound to
the batch FEFO picked for it. Nothing here touches the database; callers
hand in products and batches (plain rows for a quote, locked rows at
checkout) and the cart enforces the quantity rules against them.

Rules:
- unit_price comes from product.unit_price (0 when unset)
- line_total = qty x unit_price
- a line never asks for more than its batch's qty_on_hand
- total = subtotal - discount + tax; discount and tax are non-negative inputs
- Cash needs cash_received >= total; Card carries no cash fields
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from common.exceptions import NotFoundError, OutOfStockError, ValidationError
from products.services.classification import is_expired
from products.services.fefo import select_batch_for_sale

ZERO = Decimal("0.00")

PAYMENT_CASH = "Cash"
PAYMENT_CARD = "Card"
PAYMENT_METHODS = (PAYMENT_CASH, PAYMENT_CARD)


@dataclass
class CartLine:
    product: object
    batch: object
    qty: int
    unit_price: Decimal

    @property
    def line_total(self) -> Decimal:
        return (self.unit_price * self.qty).quantize(Decimal("0.01"))


@dataclass(frozen=True)
class CartTotals:
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class Payment:
    method: str
    cash_received: Optional[Decimal]
    change_due: Optional[Decimal]


def _price_of(product) -> Decimal:
    price = getattr(product, "unit_price", None)
    return Decimal(price) if price is not None else ZERO


def _stock_message(product, batch) -> str:
    return f"Insufficient stock for {product.name} (lot {batch.lot}: {batch.qty_on_hand} available)."


class Cart:
    def __init__(self):
        self.lines: list[CartLine] = []

    def __len__(self):
        return len(self.lines)

    # ---------------- adding ----------------
    def add_product(self, product, batches: Iterable, today, qty: int = 1) -> CartLine:
        batch = select_batch_for_sale(product.id, batches, today)
        if batch is None:
            raise OutOfStockError(f"{product.name} is out of stock.")
        return self._add(product, batch, qty)

    def add_batch(self, product, batch, today, qty: int = 1) -> CartLine:
        if batch.product_id != product.id:
            raise ValidationError(f"Batch {batch.id} does not belong to {product.name}.")
        if is_expired(batch.expiry, today):
            raise OutOfStockError(f"Batch {batch.lot} of {product.name} is expired.")
        if int(batch.qty_on_hand or 0) <= 0:
            raise OutOfStockError(f"Batch {batch.lot} of {product.name} is out of stock.")
        return self._add(product, batch, qty)

    def _add(self, product, batch, qty: int) -> CartLine:
        if qty < 1:
            raise ValidationError("qty must be at least 1")

        existing = self._find(product.id, batch.id)
        new_qty = qty + (existing.qty if existing else 0)
        if new_qty > int(batch.qty_on_hand):
            raise OutOfStockError(_stock_message(product, batch))

        if existing:
            existing.qty = new_qty
            return existing

        line = CartLine(product=product, batch=batch, qty=qty, unit_price=_price_of(product))
        self.lines.append(line)
        return line

    def _find(self, product_id, batch_id) -> Optional[CartLine]:
        for line in self.lines:
            if line.product.id == product_id and line.batch.id == batch_id:
                return line
        return None

    # ---------------- editing ----------------
    def update_qty(self, index: int, delta: int) -> Optional[CartLine]:
        line = self._line_at(index)
        new_qty = line.qty + delta

        if new_qty <= 0:
            self.remove(index)
            return None
        if new_qty > int(line.batch.qty_on_hand):
            raise OutOfStockError(_stock_message(line.product, line.batch))

        line.qty = new_qty
        return line

    def remove(self, index: int) -> None:
        self._line_at(index)
        del self.lines[index]

    def _line_at(self, index: int) -> CartLine:
        if not 0 <= index < len(self.lines):
            raise NotFoundError("Cart line not found.")
        return self.lines[index]

    # ---------------- totals ----------------
    @property
    def subtotal(self) -> Decimal:
        return sum((line.line_total for line in self.lines), ZERO)

    def totals(self, discount=ZERO, tax=ZERO) -> CartTotals:
        discount = Decimal(discount or ZERO)
        tax = Decimal(tax or ZERO)

        if discount < ZERO:
            raise ValidationError("discount cannot be negative")
        if tax < ZERO:
            raise ValidationError("tax cannot be negative")

        subtotal = self.subtotal
        total = subtotal - discount + tax
        if total < ZERO:
            raise ValidationError("discount cannot exceed subtotal plus tax")

        return CartTotals(subtotal=subtotal, discount=discount, tax=tax, total=total)


def settle_payment(totals: CartTotals, method: str, cash_received=None) -> Payment:
    if method not in PAYMENT_METHODS:
        raise ValidationError(f"payment_method must be one of: {', '.join(PAYMENT_METHODS)}")

    if method == PAYMENT_CARD:
        if cash_received is not None:
            raise ValidationError("cash_received applies to Cash payments only")
        return Payment(method=method, cash_received=None, change_due=None)

    if cash_received is None:
        raise ValidationError("cash_received is required for Cash payments")

    cash_received = Decimal(cash_received)
    if cash_received < totals.total:
        raise ValidationError("cash_received must cover the total")

    return Payment(method=method, cash_received=cash_received, change_due=cash_received - totals.total)


def build_cart(line_requests: Iterable[dict], *, products: dict, batches: list, today) -> Cart:
    """
    Turn [{product_id, qty, batch_id?}] into a Cart.

    products: {id: Product}; batches: candidate Batch rows for those products.
    Lines without batch_id are FEFO-assigned; a line never spans two batches.
    """
    batches_by_id = {b.id: b for b in batches}
    cart = Cart()

    for request in line_requests:
        product_id = request["product_id"]
        product = products.get(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found.")

        qty = int(request["qty"])
        batch_id = request.get("batch_id")

        if batch_id is None:
            cart.add_product(product, batches, today, qty=qty)
            continue

        batch = batches_by_id.get(batch_id)
        if batch is None:
            raise NotFoundError(f"Batch {batch_id} not found.")
        cart.add_batch(product, batch, today, qty=qty)

    return cart
