from .cart import Cart, build_cart, settle_payment
from .catalog import available_batches

__all__ = [
    "Cart",
    "available_batches",
    "build_cart",
    "settle_payment",
]
