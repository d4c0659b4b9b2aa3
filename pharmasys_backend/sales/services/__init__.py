from .checkout import CheckoutResult, complete_sale
from .history import PERIODS, SalesSummary, period_window, summarize_sales
from .void import void_sale

__all__ = [
    "CheckoutResult",
    "complete_sale",
    "PERIODS",
    "SalesSummary",
    "period_window",
    "summarize_sales",
    "void_sale",
]
