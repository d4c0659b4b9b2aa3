# sales/services/history.py

"""
Sales history helpers: period windows in local time and the summary
figures shown above the history table.

Weeks start on Sunday.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from decimal import Decimal

from django.db.models import Count, DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from common.exceptions import ValidationError
from sales.models import Sale

PERIOD_ALL = "all"
PERIOD_TODAY = "today"
PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
PERIODS = (PERIOD_ALL, PERIOD_TODAY, PERIOD_WEEK, PERIOD_MONTH)


@dataclass(frozen=True)
class SalesSummary:
    completed_count: int
    completed_total: Decimal
    voided_count: int


def _local_midnight(day):
    return timezone.make_aware(datetime.combine(day, time.min))


def period_window(period: str, today=None):
    """Return (start, end) aware datetimes, end exclusive; None for "all"."""
    if period not in PERIODS:
        raise ValidationError(f"period must be one of: {', '.join(PERIODS)}")
    if period == PERIOD_ALL:
        return None

    today = today or timezone.localdate()

    if period == PERIOD_TODAY:
        start = today
        end = today + timedelta(days=1)
    elif period == PERIOD_WEEK:
        # isoweekday: Mon=1 .. Sun=7
        start = today - timedelta(days=today.isoweekday() % 7)
        end = start + timedelta(days=7)
    else:
        start = today.replace(day=1)
        end = (start + timedelta(days=32)).replace(day=1)

    return _local_midnight(start), _local_midnight(end)


def summarize_sales(queryset) -> SalesSummary:
    completed = Q(status=Sale.Status.COMPLETED)
    data = queryset.order_by().aggregate(
        completed_count=Count("id", filter=completed),
        completed_total=Coalesce(
            Sum("total", filter=completed),
            Value(Decimal("0.00"), output_field=DecimalField(max_digits=14, decimal_places=2)),
        ),
        voided_count=Count("id", filter=Q(status=Sale.Status.VOIDED)),
    )
    return SalesSummary(**data)
