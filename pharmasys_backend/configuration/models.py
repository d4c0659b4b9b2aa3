# configuration/models.py

from django.db import models

LOW_STOCK_THRESHOLD_KEY = "LowStockThreshold"
NEAR_EXPIRY_DAYS_KEY = "NearExpiryDays"

DEFAULT_VALUES = {
    LOW_STOCK_THRESHOLD_KEY: 10,
    NEAR_EXPIRY_DAYS_KEY: 90,
}


class Setting(models.Model):
    """
    One key/value row per business setting.
    Values are stored as text and parsed by configuration.registry.
    """

    key = models.CharField(max_length=64, unique=True)
    value = models.CharField(max_length=255)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return f"{self.key}={self.value}"
