from .checkout import CheckoutSaleView

__all__ = ["CheckoutSaleView"]
