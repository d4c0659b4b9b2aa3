# configuration/registry.py

"""
SETTINGS REGISTRY

Business thresholds are read from the Setting table into an immutable
Thresholds snapshot. Callers take one snapshot per request and pass it
into services explicitly; nothing reads the table behind their back.

- snapshot():   cached snapshot, loaded on first use
- reload():     re-read the table now
- invalidate(): drop the cache; the next snapshot() reloads
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from configuration.models import (
    DEFAULT_VALUES,
    LOW_STOCK_THRESHOLD_KEY,
    NEAR_EXPIRY_DAYS_KEY,
    Setting,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Thresholds:
    low_stock_threshold: int = DEFAULT_VALUES[LOW_STOCK_THRESHOLD_KEY]
    near_expiry_days: int = DEFAULT_VALUES[NEAR_EXPIRY_DAYS_KEY]

    def as_dict(self) -> dict:
        return {
            LOW_STOCK_THRESHOLD_KEY: self.low_stock_threshold,
            NEAR_EXPIRY_DAYS_KEY: self.near_expiry_days,
        }


def _parse_stored(key: str, raw: Optional[str]) -> int:
    default = DEFAULT_VALUES[key]
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        value = 0
    if value < 1:
        logger.warning(
            "Invalid stored setting; using default",
            extra={"key": key, "stored_value": raw, "default": default},
        )
        return default
    return value


def load_thresholds() -> Thresholds:
    stored = dict(
        Setting.objects.filter(key__in=DEFAULT_VALUES.keys()).values_list("key", "value")
    )
    return Thresholds(
        low_stock_threshold=_parse_stored(LOW_STOCK_THRESHOLD_KEY, stored.get(LOW_STOCK_THRESHOLD_KEY)),
        near_expiry_days=_parse_stored(NEAR_EXPIRY_DAYS_KEY, stored.get(NEAR_EXPIRY_DAYS_KEY)),
    )


class SettingsRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot: Optional[Thresholds] = None

    def snapshot(self) -> Thresholds:
        with self._lock:
            if self._snapshot is None:
                self._snapshot = load_thresholds()
            return self._snapshot

    def reload(self) -> Thresholds:
        fresh = load_thresholds()
        with self._lock:
            self._snapshot = fresh
        return fresh

    def invalidate(self) -> None:
        with self._lock:
            self._snapshot = None


registry = SettingsRegistry()