from .fefo import fefo_sort_key, select_batch_for_sale
from .stock_adjustments import AdjustmentResult, adjust_batch_quantity
from .stock_intake import ReceiveResult, receive_stock

__all__ = [
    "AdjustmentResult",
    "ReceiveResult",
    "adjust_batch_quantity",
    "fefo_sort_key",
    "receive_stock",
    "select_batch_for_sale",
]
