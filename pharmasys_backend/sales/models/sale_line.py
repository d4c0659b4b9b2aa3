# sales/models/sale_line.py

"""
SALE LINE (IMMUTABLE SNAPSHOT)

One product drawn from one batch, priced at sale time.
line_total = qty x unit_price.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from products.models import Batch, Product

from .sale import Sale


class SaleLine(models.Model):
    sale = models.ForeignKey(Sale, on_delete=models.CASCADE, related_name="lines")
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name="sale_lines")
    batch = models.ForeignKey(Batch, on_delete=models.PROTECT, related_name="sale_lines")

    qty = models.PositiveIntegerField()
    unit_price = models.DecimalField(max_digits=12, decimal_places=2)
    line_total = models.DecimalField(max_digits=14, decimal_places=2)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=Q(qty__gt=0), name="chk_saleline_qty_gt_zero"),
        ]

    def clean(self):
        if not self.qty or self.qty <= 0:
            raise ValidationError({"qty": "qty must be greater than zero"})
        if self.line_total != self.unit_price * self.qty:
            raise ValidationError("line_total must equal qty x unit_price")

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("SaleLine records are immutable")
        self.full_clean()
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("SaleLine records are immutable and cannot be deleted")

    def __str__(self):
        return f"{self.product_id} x {self.qty}"
