# sales/models/sale.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from common.exceptions import InvalidStateError


class Sale(models.Model):
    """
    Represents a completed POS transaction.

    GUARANTEES:
    - total = subtotal - discount + tax
    - Immutable financial record after creation
    - Only lifecycle change: Completed -> Voided (see sales.services.sale_lifecycle)
    - Stock is mutated ONLY via the checkout / void services
    """

    class Status(models.TextChoices):
        COMPLETED = "Completed", "Completed"
        VOIDED = "Voided", "Voided"

    class PaymentMethod(models.TextChoices):
        CASH = "Cash", "Cash"
        CARD = "Card", "Card"

    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=150, help_text="Cashier username")

    patient = models.CharField(max_length=255, blank=True, default="")

    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    tax = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    payment_method = models.CharField(max_length=8, choices=PaymentMethod.choices)
    cash_received = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    change_due = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    notes = models.TextField(blank=True, default="")

    status = models.CharField(max_length=16, choices=Status.choices, default=Status.COMPLETED)
    voided_at = models.DateTimeField(null=True, blank=True)
    void_reason = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["created_at"], name="sale_created_idx"),
            models.Index(fields=["status"], name="sale_status_idx"),
        ]

    _IMMUTABLE_FIELDS = (
        "created_by",
        "patient",
        "subtotal",
        "discount",
        "tax",
        "total",
        "payment_method",
        "cash_received",
        "change_due",
        "notes",
    )

    def clean(self):
        if self.subtotal - self.discount + self.tax != self.total:
            raise ValidationError("total must equal subtotal - discount + tax")
        if self.status == self.Status.VOIDED and not self.voided_at:
            raise ValidationError("voided sales need voided_at")

    def _validate_immutable(self, previous: "Sale"):
        from sales.services.sale_lifecycle import can_transition

        if self.status != previous.status and not can_transition(
            from_status=previous.status, to_status=self.status
        ):
            raise InvalidStateError(
                f"Status change {previous.status} -> {self.status} is not allowed."
            )

        for field in self._IMMUTABLE_FIELDS:
            if getattr(self, field) != getattr(previous, field):
                raise InvalidStateError(f"Sale field '{field}' cannot be changed.")

    def save(self, *args, **kwargs):
        if self.pk and not self._state.adding:
            previous = Sale.objects.filter(pk=self.pk).first()
            if previous is not None:
                self._validate_immutable(previous)

        self.full_clean()
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise InvalidStateError("Sales cannot be deleted; void them instead.")

    def __str__(self):
        return f"Sale #{self.pk} | {self.total} | {self.status}"
