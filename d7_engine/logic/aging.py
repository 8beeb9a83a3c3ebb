# logic/aging.py
from __future__ import annotations

import re
from datetime import date
from typing import List, Optional

URGENCY_LOW = "low"
URGENCY_MEDIUM = "medium"
URGENCY_HIGH = "high"
URGENCY_CRITICAL = "critical"
URGENCY_LEVELS = (URGENCY_LOW, URGENCY_MEDIUM, URGENCY_HIGH, URGENCY_CRITICAL)

# Years above this are Buddhist Era (B.E. = C.E. + 543)
BUDDHIST_YEAR_THRESHOLD = 2400
BUDDHIST_YEAR_OFFSET = 543

AGING_BUCKETS: List[str] = ["0-15 วัน", "16-30 วัน", "31-60 วัน", "60+ วัน"]

_DATE_SPLIT = re.compile(r"[/.\-]")
# ASCII digits only; Thai numerals are not numbers to the sheet
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
# Longer parts cannot be a calendar field
_MAX_INT_DIGITS = 9


def _lenient_int(raw: str) -> Optional[int]:
    """Leading-digits integer parse: '05 ' -> 5, '2568abc' -> 2568, 'abc' -> None."""
    m = _LEADING_INT.match(raw)
    if not m:
        return None
    digits = m.group(1)
    if len(digits.lstrip("+-")) > _MAX_INT_DIGITS:
        return None
    return int(digits)


def parse_payment_date(raw: str) -> Optional[date]:
    """
    Parse a day/month/year string (any of / . - as separator).
    Returns None for anything that is not a real calendar date.
    """
    if not raw:
        return None

    parts = _DATE_SPLIT.split(raw)
    if len(parts) != 3:
        return None

    day, month, year = (_lenient_int(p) for p in parts)
    if day is None or month is None or year is None:
        return None

    if year > BUDDHIST_YEAR_THRESHOLD:
        year -= BUDDHIST_YEAR_OFFSET
    if year < 100:
        year += 2000

    try:
        return date(year, month, day)
    except ValueError:
        return None


def compute_aging_days(raw: str, today: Optional[date] = None) -> int:
    """
    Days elapsed from the payment date to today (local calendar day).
    Malformed or missing dates give 0, future dates are clamped to 0.
    """
    target = parse_payment_date(raw)
    if target is None:
        return 0

    today = today or date.today()
    days = (today - target).days
    return days if days > 0 else 0


def classify_urgency(aging_days: int) -> str:
    if aging_days > 60:
        return URGENCY_CRITICAL
    if aging_days > 30:
        return URGENCY_HIGH
    if aging_days > 15:
        return URGENCY_MEDIUM
    return URGENCY_LOW


def aging_bucket(aging_days: int) -> str:
    if aging_days <= 15:
        return AGING_BUCKETS[0]
    if aging_days <= 30:
        return AGING_BUCKETS[1]
    if aging_days <= 60:
        return AGING_BUCKETS[2]
    return AGING_BUCKETS[3]
