# pos/services/catalog.py

"""
Sellable batches for the POS product grid: stock on hand, not expired,
optionally narrowed by a product name / code search. Rows come back in
FEFO order so the first hit per product is the batch a sale will draw.
"""

from __future__ import annotations

from django.db.models import Q

from products.models import Batch
from products.services import fefo_sort_key


def available_batches(*, today, query: str = "") -> list[Batch]:
    queryset = (
        Batch.objects.select_related("product")
        .filter(qty_on_hand__gt=0)
        .filter(Q(expiry__isnull=True) | Q(expiry__gte=today))
    )

    term = (query or "").strip()
    if term:
        queryset = queryset.filter(
            Q(product__name__icontains=term) | Q(product__code_value__icontains=term)
        )

    return sorted(queryset, key=fefo_sort_key)
