# logic/records.py
from __future__ import annotations

import math
import re
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Sequence

import pandas as pd

from .aging import classify_urgency, compute_aging_days

MIN_FIELDS = 8
PAYMENT_DATE_INDEX = 7

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class TaxRecord:
    id: str
    business_type: str      # A ประเภทธุรกิจ
    branch_code: str        # B กฟฟ.
    document_date: str      # C วันที่เอกสาร
    posting_date: str       # D วันที่ผ่านรายการ
    debt_doc_no: str        # E เลขที่เอกสารตั้งหนี้
    period: str             # F ปี/เดือน
    payment_doc_no: str     # G เลขที่เอกสารชำระเงิน
    payment_date: str       # H วันที่ชำระเงิน
    tax_invoice_no: str     # I เลขที่ใบกำกับภาษี
    vendor_name: str        # J ชื่อผู้ขาย/ผู้ให้บริการ
    vendor_tax_id: str      # K เลขประจำตัว
    tax_base: float         # L มูลค่าฐานภาษี
    input_vat: float        # M มูลค่าภาษีซื้อ
    product_value: float    # N มูลค่าสินค้า
    status: str             # O สถานะรายการ
    aging_days: int
    urgency: str


# Positional sheet layout (column A..O)
TEXT_FIELDS = (
    (0, "business_type"),
    (1, "branch_code"),
    (2, "document_date"),
    (3, "posting_date"),
    (4, "debt_doc_no"),
    (5, "period"),
    (6, "payment_doc_no"),
    (7, "payment_date"),
    (8, "tax_invoice_no"),
    (9, "vendor_name"),
    (10, "vendor_tax_id"),
    (14, "status"),
)
AMOUNT_FIELDS = (
    (11, "tax_base"),
    (12, "input_vat"),
    (13, "product_value"),
)

# Thai headers used for exports
FIELD_LABELS = {
    "status": "สถานะรายการ",
    "aging_days": "Aging (วัน)",
    "urgency": "ระดับความเร่งด่วน",
    "business_type": "ประเภทธุรกิจ",
    "branch_code": "กฟฟ.",
    "document_date": "วันที่เอกสาร",
    "posting_date": "วันที่ผ่านรายการ",
    "debt_doc_no": "เลขที่เอกสารตั้งหนี้",
    "period": "ปี/เดือน",
    "payment_doc_no": "เลขที่เอกสารชำระเงิน",
    "payment_date": "วันที่ชำระเงิน",
    "tax_invoice_no": "เลขที่ใบกำกับภาษี",
    "vendor_name": "ชื่อผู้ขาย/ผู้ให้บริการ",
    "vendor_tax_id": "เลขประจำตัว",
    "tax_base": "มูลค่าฐานภาษี",
    "input_vat": "มูลค่าภาษีซื้อ",
    "product_value": "มูลค่าสินค้า",
}


def parse_amount(raw: Optional[str]) -> float:
    """
    '1,234.50' -> 1234.5. Reads the leading number like a spreadsheet would
    ('12abc' -> 12.0). Empty or unparseable text gives 0.0; negatives are kept.
    """
    if not raw:
        return 0.0
    m = _LEADING_FLOAT.match(raw.replace(",", ""))
    if not m:
        return 0.0
    value = float(m.group(0))
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def _field(row: Sequence[str], idx: int) -> str:
    return row[idx] if idx < len(row) else ""


def is_data_row(row: Sequence[str]) -> bool:
    if len(row) < MIN_FIELDS:
        return False
    return row[1] != "" or row[2] != "" or row[3] != ""


def _default_id_factory() -> Callable[[int], str]:
    load_token = time.time_ns()
    return lambda idx: f"row-{idx}-{load_token}"


def map_row(row: Sequence[str], record_id: str, today: date) -> TaxRecord:
    values = {name: _field(row, idx) for idx, name in TEXT_FIELDS}
    values.update({name: parse_amount(_field(row, idx)) for idx, name in AMOUNT_FIELDS})

    aging_days = max(0, compute_aging_days(_field(row, PAYMENT_DATE_INDEX), today))

    return TaxRecord(
        id=record_id,
        aging_days=aging_days,
        urgency=classify_urgency(aging_days),
        **values,
    )


def map_rows(
    rows: Sequence[Sequence[str]],
    today: Optional[date] = None,
    id_factory: Optional[Callable[[int], str]] = None,
) -> List[TaxRecord]:
    """
    Convert parsed sheet rows into TaxRecords.
    The first row is the header and is always dropped. Rows with fewer than
    8 fields, or with columns B, C and D all empty, are skipped silently.
    """
    today = today or date.today()
    make_id = id_factory or _default_id_factory()

    data_rows = [r for r in list(rows)[1:] if is_data_row(r)]
    return [map_row(row, make_id(idx), today) for idx, row in enumerate(data_rows)]


def records_to_frame(records: Sequence[TaxRecord]) -> pd.DataFrame:
    """Records as a DataFrame with Thai column headers, in table display order."""
    columns = list(FIELD_LABELS.keys())
    df = pd.DataFrame(
        [{c: getattr(r, c) for c in columns} for r in records],
        columns=columns,
    )
    return df.rename(columns=FIELD_LABELS)
