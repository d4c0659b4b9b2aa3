# products/services/gs1.py

"""
GS1 BARCODE PARSER (RECEIVING)

Pulls the receiving fields out of a scanned GS1 element string:
    (01) GTIN, 14 digits
    (10) lot, up to 20 characters
    (17) expiry, YYMMDD

Elements are read left to right. Fixed-length elements need no
terminator; variable-length ones run to the next FNC1 (sent by scanners
as GS 0x1D or RS 0x1E) or the end of input. Human-readable
"(01)...(17)...(10)..." input and a leading symbology identifier
("]C1", "]d2", ...) are accepted too.

Years above 50 are read as 19YY, the rest as 20YY. Day "00" means the
last day of the month.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from common.exceptions import ValidationError

SEPARATOR = "|"

FIXED_LENGTH = {
    "00": 18,
    "01": 14,
    "02": 14,
    "11": 6,
    "12": 6,
    "13": 6,
    "15": 6,
    "16": 6,
    "17": 6,
    "20": 2,
}
VARIABLE_MAX_LENGTH = {
    "10": 20,
    "21": 20,
    "22": 20,
    "30": 8,
    "37": 8,
}

AI_GTIN = "01"
AI_LOT = "10"
AI_EXPIRY = "17"


@dataclass(frozen=True)
class GS1Data:
    gtin: str
    lot: Optional[str] = None
    expiry: Optional[date] = None


def _normalise(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("]"):
        cleaned = cleaned[3:]
    cleaned = re.sub(r"[\x1d\x1e]", SEPARATOR, cleaned)
    # "(01)123..." -> "|01123..."
    return re.sub(r"\((\d{2})\)", SEPARATOR + r"\1", cleaned)


def split_elements(raw: str) -> dict[str, str]:
    """Return {application identifier: value}; the first occurrence wins."""
    text = _normalise(raw)
    elements: dict[str, str] = {}
    pos = 0

    while pos < len(text):
        if text[pos] == SEPARATOR:
            pos += 1
            continue

        ai = text[pos : pos + 2]
        start = pos + 2

        if ai in FIXED_LENGTH:
            end = start + FIXED_LENGTH[ai]
            value = text[start:end]
            if len(value) != FIXED_LENGTH[ai] or not (value.isascii() and value.isdigit()):
                raise ValidationError(f"Malformed GS1 element ({ai}).")
        elif ai in VARIABLE_MAX_LENGTH:
            end = text.find(SEPARATOR, start)
            if end == -1:
                end = len(text)
            value = text[start:end]
            if not value or len(value) > VARIABLE_MAX_LENGTH[ai]:
                raise ValidationError(f"Malformed GS1 element ({ai}).")
        else:
            raise ValidationError(f"Unsupported GS1 application identifier: {ai}")

        elements.setdefault(ai, value)
        pos = end

    return elements


def _expiry_from(value: str) -> date:
    yy, mm, dd = int(value[0:2]), int(value[2:4]), int(value[4:6])
    year = yy + (1900 if yy > 50 else 2000)
    if not 1 <= mm <= 12:
        raise ValidationError(f"Invalid expiry in barcode: {value}")

    day = dd or calendar.monthrange(year, mm)[1]
    try:
        return date(year, mm, day)
    except ValueError:
        raise ValidationError(f"Invalid expiry in barcode: {value}") from None


def parse_gs1(raw) -> GS1Data:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("barcode is required")

    elements = split_elements(raw)

    gtin = elements.get(AI_GTIN)
    if gtin is None:
        raise ValidationError("Could not extract GTIN from the barcode.")

    expiry = elements.get(AI_EXPIRY)
    return GS1Data(
        gtin=gtin,
        lot=elements.get(AI_LOT),
        expiry=_expiry_from(expiry) if expiry else None,
    )
