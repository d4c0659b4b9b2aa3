# products/services/dashboard.py

"""
DASHBOARD TILES

- today_sales        sum of totals of today's Completed sales
- distinct_products  number of products
- total_batches      number of batches
- total_on_hand      sum of batch qty_on_hand
- expired_count      batches past expiry
- near_expiry_count  batches inside the near-expiry window
- low_stock_count    products flagged is_low_stock (zero stock included)
- stock_value        sum of qty_on_hand x product.unit_price
- near_expiry        near-expiry batches, soonest first
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from decimal import Decimal

from django.db.models import DecimalField, ExpressionWrapper, F, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from products.models import Batch, Product
from products.services.classification import classify_product
from products.services.inventory import BatchView, describe_batch
from sales.models import Sale

ZERO = Decimal("0.00")
MONEY = DecimalField(max_digits=12, decimal_places=2)


@dataclass(frozen=True)
class DashboardTiles:
    today_sales: Decimal
    distinct_products: int
    total_batches: int
    total_on_hand: int
    expired_count: int
    near_expiry_count: int
    low_stock_count: int
    stock_value: Decimal
    near_expiry: list[BatchView] = field(default_factory=list)


def _today_sales_total(today) -> Decimal:
    tz = timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(today, time.min), tz)
    end = start + timedelta(days=1)

    total = (
        Sale.objects.filter(
            status=Sale.Status.COMPLETED,
            created_at__gte=start,
            created_at__lt=end,
        ).aggregate(total=Sum("total"))["total"]
    )
    return total or ZERO


def build_dashboard(*, today, thresholds) -> DashboardTiles:
    near_limit = today + timedelta(days=thresholds.near_expiry_days)

    batches = Batch.objects.all()

    expired_count = batches.filter(expiry__lt=today).count()
    near_expiry_qs = (
        batches.filter(expiry__gte=today, expiry__lte=near_limit)
        .select_related("product")
        .order_by("expiry", "id")
    )

    per_product_qty = (
        Product.objects.annotate(total=Coalesce(Sum("batches__qty_on_hand"), Value(0)))
        .values_list("total", flat=True)
    )
    low_stock_count = sum(
        1
        for qty in per_product_qty
        if classify_product([qty], thresholds.low_stock_threshold).is_low_stock
    )

    stock_value = batches.aggregate(
        value=Sum(
            ExpressionWrapper(
                F("qty_on_hand") * Coalesce(F("product__unit_price"), Value(ZERO, output_field=MONEY)),
                output_field=DecimalField(max_digits=18, decimal_places=2),
            )
        )
    )["value"]

    return DashboardTiles(
        today_sales=_today_sales_total(today),
        distinct_products=Product.objects.count(),
        total_batches=batches.count(),
        total_on_hand=batches.aggregate(total=Sum("qty_on_hand"))["total"] or 0,
        expired_count=expired_count,
        near_expiry_count=near_expiry_qs.count(),
        low_stock_count=low_stock_count,
        stock_value=(stock_value or ZERO).quantize(Decimal("0.01")),
        near_expiry=[describe_batch(b, today=today, thresholds=thresholds) for b in near_expiry_qs],
    )
