"""
Products views package exports.
"""

from .dashboard import DashboardView
from .inventory import BatchListView, InventoryExportView, InventoryView
from .product import ProductViewSet
from .stock import AdjustmentView, GS1ParseView, ReceiveView

__all__ = [
    "AdjustmentView",
    "BatchListView",
    "DashboardView",
    "GS1ParseView",
    "InventoryExportView",
    "InventoryView",
    "ProductViewSet",
    "ReceiveView",
]
