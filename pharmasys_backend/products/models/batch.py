# products/models/batch.py

"""
BATCH (ONE LOT OF ONE PRODUCT)

- expiry is a calendar date; NULL means the lot does not expire
- qty_on_hand is never negative (DB check constraint)
- qty_on_hand is mutated ONLY via services (receive, adjust, checkout, void)
- Non-deletable once referenced by adjustments or sale lines (PROTECT)
"""

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from .product import Product


class Batch(models.Model):
    product = models.ForeignKey(
        Product,
        on_delete=models.PROTECT,
        related_name="batches",
    )

    lot = models.CharField(max_length=128, help_text="Supplier lot / batch number")

    expiry = models.DateField(null=True, blank=True)

    qty_on_hand = models.IntegerField(default=0)

    unit_cost = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["expiry", "id"]
        indexes = [
            models.Index(fields=["product", "expiry"], name="batch_product_expiry_idx"),
            models.Index(fields=["expiry"], name="batch_expiry_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(qty_on_hand__gte=0),
                name="chk_batch_qty_on_hand_gte_zero",
            ),
        ]

    def clean(self):
        if self.qty_on_hand is None or self.qty_on_hand < 0:
            raise ValidationError({"qty_on_hand": "qty_on_hand cannot be negative"})
        if not (self.lot or "").strip():
            raise ValidationError({"lot": "lot is required"})

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.product.name} | lot {self.lot} | {self.qty_on_hand}"
