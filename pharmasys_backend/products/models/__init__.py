"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .adjustment import Adjustment
from .batch import Batch
from .product import Product

__all__ = [
    "Adjustment",
    "Batch",
    "Product",
]
