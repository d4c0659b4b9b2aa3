from .issue import Issue
from .sale import Sale
from .sale_line import SaleLine

__all__ = [
    "Issue",
    "Sale",
    "SaleLine",
]
