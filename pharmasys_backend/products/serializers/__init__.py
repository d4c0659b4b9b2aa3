from .batch import BatchSerializer, BatchStatusSerializer, ProductInventorySerializer
from .gs1 import GS1ParseInputSerializer, GS1ParseSerializer
from .product import ProductCreateSerializer, ProductSerializer
from .stock import (
    AdjustmentRequestSerializer,
    AdjustmentSerializer,
    DashboardSerializer,
    ReceiveSerializer,
)

__all__ = [
    "AdjustmentRequestSerializer",
    "AdjustmentSerializer",
    "BatchSerializer",
    "BatchStatusSerializer",
    "DashboardSerializer",
    "GS1ParseInputSerializer",
    "GS1ParseSerializer",
    "ProductCreateSerializer",
    "ProductInventorySerializer",
    "ProductSerializer",
    "ReceiveSerializer",
]
