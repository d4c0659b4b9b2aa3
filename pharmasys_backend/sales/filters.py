# sales/filters.py

from __future__ import annotations

import django_filters
from django.db.models import Q

from sales.models import Sale
from sales.services.history import PERIOD_ALL, PERIODS, period_window


class SaleFilter(django_filters.FilterSet):
    period = django_filters.ChoiceFilter(
        choices=[(p, p.title()) for p in PERIODS],
        method="filter_period",
        empty_label=None,
    )
    status = django_filters.ChoiceFilter(choices=Sale.Status.choices)
    q = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Sale
        fields = []

    def __init__(self, data=None, queryset=None, *, request=None, prefix=None, today=None):
        super().__init__(data=data, queryset=queryset, request=request, prefix=prefix)
        self.today = today

    def filter_period(self, queryset, name, value):
        if not value or value == PERIOD_ALL:
            return queryset
        start, end = period_window(value, today=self.today)
        return queryset.filter(created_at__gte=start, created_at__lt=end)

    def filter_search(self, queryset, name, value):
        term = (value or "").strip().lstrip("#")
        if not term:
            return queryset

        match = Q(patient__icontains=term) | Q(created_by__icontains=term)
        # ids are 64-bit; longer digit runs only match text
        if term.isascii() and term.isdigit() and len(term) <= 18:
            match |= Q(pk=int(term))
        return queryset.filter(match)
