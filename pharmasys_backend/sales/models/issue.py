# sales/models/issue.py

"""
ISSUE (DISPENSE RECORD)

One row per sale line: which batch left the shelf, how many units,
for which patient. Informational and append-only.
"""

from django.core.exceptions import ValidationError
from django.db import models

from products.models import Batch, Product

from .sale import Sale


class Issue(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=150)

    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="issues")
    batch = models.ForeignKey(Batch, on_delete=models.PROTECT, related_name="issues")
    qty = models.PositiveIntegerField()
    patient = models.CharField(max_length=255, blank=True, default="")

    sale = models.ForeignKey(Sale, on_delete=models.CASCADE, related_name="issues")

    class Meta:
        ordering = ["id"]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("Issue records are immutable")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"Issue {self.product_id} x {self.qty} (sale {self.sale_id})"
