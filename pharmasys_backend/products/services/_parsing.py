# products/services/_parsing.py

"""
Input normalizers shared by the stock services.
All failures raise common.exceptions.ValidationError before any write.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.utils.dateparse import parse_date

from common.exceptions import ValidationError

TWOPLACES = Decimal("0.01")
INTEGER_RE = re.compile(r"-?[0-9]+")


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def to_int(value, *, field_name: str) -> int:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal) and value == value.to_integral_value():
        return int(value)
    if isinstance(value, str) and INTEGER_RE.fullmatch(value.strip()):
        return int(value.strip())
    raise ValidationError(f"{field_name} must be an integer")


def to_money(value, *, field_name: str, required: bool = True):
    if is_blank(value):
        if required:
            raise ValidationError(f"{field_name} is required")
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    return amount.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def to_date(value, *, field_name: str) -> date:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = parse_date(str(value).strip())
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    return parsed


def clean_text(value) -> str:
    return "" if value is None else str(value).strip()
