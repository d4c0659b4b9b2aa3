# configuration/services.py

from __future__ import annotations

import logging

from django.db import transaction

from common.exceptions import ValidationError
from configuration.models import DEFAULT_VALUES, Setting
from configuration.registry import Thresholds, registry

logger = logging.getLogger(__name__)


def validate_settings_values(values: dict) -> dict[str, int]:
    """Known keys only; every value a positive integer. Never coerces bad input."""
    if not values:
        raise ValidationError("No settings supplied.")

    cleaned: dict[str, int] = {}
    for key, raw in values.items():
        if key not in DEFAULT_VALUES:
            raise ValidationError(f"Unknown setting: {key}")
        if isinstance(raw, bool):
            raise ValidationError(f"{key} must be a positive integer.")
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            raise ValidationError(f"{key} must be a positive integer.") from None
        if value < 1:
            raise ValidationError(f"{key} must be a positive integer.")
        cleaned[key] = value
    return cleaned


def update_settings(*, values: dict, user=None) -> Thresholds:
    cleaned = validate_settings_values(values)

    with transaction.atomic():
        for key, value in cleaned.items():
            Setting.objects.update_or_create(key=key, defaults={"value": str(value)})

    logger.info(
        "Settings updated",
        extra={"changes": cleaned, "updated_by": getattr(user, "username", None)},
    )
    return registry.reload()
