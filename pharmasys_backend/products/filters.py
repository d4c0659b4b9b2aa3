# products/filters.py

"""
django-filter FilterSets for the inventory listings.

BatchFilter needs a reference date and a Thresholds snapshot, passed by
the view, so status filters agree with the labels on each row.
"""

from __future__ import annotations

from datetime import timedelta

import django_filters
from django.db.models import Q

from products.models import Adjustment, Batch, Product

BATCH_FILTER_CHOICES = [
    ("all", "All"),
    ("expired", "Expired"),
    ("nearexpiry", "Near expiry"),
    ("lowstock", "Low stock"),
]


class BatchFilter(django_filters.FilterSet):
    filter = django_filters.ChoiceFilter(
        choices=BATCH_FILTER_CHOICES,
        method="filter_status",
        empty_label=None,
    )
    q = django_filters.CharFilter(method="filter_search")
    product_id = django_filters.NumberFilter(field_name="product_id")

    class Meta:
        model = Batch
        fields = []

    def __init__(self, data=None, queryset=None, *, request=None, prefix=None, today=None, thresholds=None):
        super().__init__(data=data, queryset=queryset, request=request, prefix=prefix)
        self.today = today
        self.thresholds = thresholds

    def filter_status(self, queryset, name, value):
        if value == "expired":
            return queryset.filter(expiry__lt=self.today)
        if value == "nearexpiry":
            near_limit = self.today + timedelta(days=self.thresholds.near_expiry_days)
            return queryset.filter(expiry__gte=self.today, expiry__lte=near_limit)
        if value == "lowstock":
            return queryset.filter(
                qty_on_hand__gt=0,
                qty_on_hand__lte=self.thresholds.low_stock_threshold,
            )
        return queryset

    def filter_search(self, queryset, name, value):
        term = (value or "").strip()
        if not term:
            return queryset
        return queryset.filter(
            Q(product__name__icontains=term)
            | Q(product__code_value__icontains=term)
            | Q(lot__icontains=term)
        )


class AdjustmentFilter(django_filters.FilterSet):
    product_id = django_filters.NumberFilter(field_name="product_id")
    batch_id = django_filters.NumberFilter(field_name="batch_id")

    class Meta:
        model = Adjustment
        fields = []


class ProductFilter(django_filters.FilterSet):
    """
    ?code=  exact code_value, case-insensitive (receive-form lookup)
    ?q=     name or code_value contains
    """

    code = django_filters.CharFilter(field_name="code_value", lookup_expr="iexact")
    q = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Product
        fields = []

    def filter_search(self, queryset, name, value):
        term = (value or "").strip()
        if not term:
            return queryset
        return queryset.filter(Q(name__icontains=term) | Q(code_value__icontains=term))
