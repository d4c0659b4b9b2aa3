# products/models/adjustment.py

"""
STOCK ADJUSTMENT AUDIT LOG

Immutable record of every quantity change made outside a sale:
receipts ("Initial stock receipt"), manual corrections, and void
restorations.

GUARANTEES:
- Append-only (no updates, no deletes)
- delta is signed and never zero
- batch, when present, belongs to product
"""

from django.core.exceptions import ValidationError
from django.db import models

from .batch import Batch
from .product import Product


class Adjustment(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)

    # Username snapshot: the log survives account deletion.
    created_by = models.CharField(max_length=150)

    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="adjustments")
    batch = models.ForeignKey(
        Batch,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="adjustments",
    )

    delta = models.IntegerField()
    reason = models.CharField(max_length=255)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["product", "created_at"], name="adjustment_product_created_idx"),
            models.Index(fields=["batch", "created_at"], name="adjustment_batch_created_idx"),
        ]

    def clean(self):
        if not self.delta:
            raise ValidationError({"delta": "delta cannot be 0"})
        if not (self.reason or "").strip():
            raise ValidationError({"reason": "reason is required"})
        if self.batch_id and self.product_id:
            batch_product_id = (
                Batch.objects.filter(id=self.batch_id).values_list("product_id", flat=True).first()
            )
            if batch_product_id is not None and batch_product_id != self.product_id:
                raise ValidationError("Batch does not belong to product")

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("Adjustment records are immutable")
        self.full_clean()
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("Adjustment records are immutable and cannot be deleted")

    def __str__(self):
        return f"{self.product_id} | {self.delta:+d} | {self.reason}"
