# logic/stats.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .aging import AGING_BUCKETS, aging_bucket
from .records import TaxRecord

UNSPECIFIED_LABEL = "ไม่ระบุ"
PAID_MARKER = "จ่ายชำระเงินแล้ว"
UNPAID_MARKER = "ยังไม่จ่ายชำระเงิน"
OVERDUE_AFTER_DAYS = 30


@dataclass(frozen=True)
class SummaryStats:
    total_records: int = 0
    total_base_value: float = 0.0
    total_vat: float = 0.0
    total_product_value: float = 0.0
    average_aging: float = 0.0
    overdue_count: int = 0


@dataclass(frozen=True)
class ColumnTotals:
    tax_base: float = 0.0
    input_vat: float = 0.0
    product_value: float = 0.0


def compute_summary_stats(records: Sequence[TaxRecord]) -> SummaryStats:
    if not records:
        return SummaryStats()

    total_aging = sum(r.aging_days for r in records)
    return SummaryStats(
        total_records=len(records),
        total_base_value=sum(r.tax_base for r in records),
        total_vat=sum(r.input_vat for r in records),
        total_product_value=sum(r.product_value for r in records),
        average_aging=total_aging / len(records),
        overdue_count=sum(1 for r in records if r.aging_days > OVERDUE_AFTER_DAYS),
    )


def column_totals(records: Sequence[TaxRecord]) -> ColumnTotals:
    """Footer sums for whatever subset of records the table currently shows."""
    return ColumnTotals(
        tax_base=sum(r.tax_base for r in records),
        input_vat=sum(r.input_vat for r in records),
        product_value=sum(r.product_value for r in records),
    )


def aging_distribution(records: Sequence[TaxRecord]) -> List[Tuple[str, int]]:
    counts = Counter(aging_bucket(r.aging_days) for r in records)
    return [(name, counts.get(name, 0)) for name in AGING_BUCKETS]


def counts_by_business_type(records: Sequence[TaxRecord], limit: int = 8) -> List[Tuple[str, int]]:
    counts: Dict[str, int] = {}
    for r in records:
        key = r.business_type or UNSPECIFIED_LABEL
        counts[key] = counts.get(key, 0) + 1
    # sorted() is stable: ties keep first-seen order
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return ranked[:limit]


def counts_by_status(records: Sequence[TaxRecord]) -> List[Tuple[str, int]]:
    counts: Dict[str, int] = {}
    for r in records:
        key = r.status or UNSPECIFIED_LABEL
        counts[key] = counts.get(key, 0) + 1
    return list(counts.items())


def status_flags(records: Sequence[TaxRecord]) -> Tuple[bool, bool]:
    """(has_paid, has_unpaid) based on the status text of each record."""
    has_paid = any(PAID_MARKER in r.status for r in records)
    has_unpaid = any(UNPAID_MARKER in r.status for r in records)
    return has_paid, has_unpaid
