# products/models/product.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class Product(models.Model):
    """
    Represents a dispensable product (one code_value = one product).

    STOCK MODEL (IMPORTANT):
    - Product itself does NOT store stock
    - Stock lives in Batch.qty_on_hand
    - Total stock = sum of all batch quantities (see products.services.classification)
    """

    class CodeType(models.TextChoices):
        GTIN = "GTIN", "GTIN"
        NATIONAL = "National", "National"
        INTERNAL_SKU = "InternalSku", "Internal SKU"

    code_type = models.CharField(
        max_length=16,
        choices=CodeType.choices,
        default=CodeType.INTERNAL_SKU,
    )
    code_value = models.CharField(max_length=128, unique=True)

    name = models.CharField(max_length=255, db_index=True)
    strength = models.CharField(max_length=64, blank=True, default="")
    form = models.CharField(max_length=64, blank=True, default="")
    pack_size = models.CharField(max_length=64, blank=True, default="")
    uom = models.CharField(max_length=32, blank=True, default="")

    # Selling price; NULL means "not priced yet" (sells at 0).
    unit_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    unit_cost = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self):
        return f"{self.name} ({self.code_value})"

    def clean(self):
        if not (self.name or "").strip():
            raise ValidationError({"name": "name is required"})
        if not (self.code_value or "").strip():
            raise ValidationError({"code_value": "code_value is required"})
        for field in ("unit_price", "unit_cost"):
            value = getattr(self, field)
            if value is not None and Decimal(value) < Decimal("0.00"):
                raise ValidationError({field: f"{field} cannot be negative"})

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)
