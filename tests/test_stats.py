import pytest

from d7_engine.logic.csv_parser import parse_csv_text
from d7_engine.logic.records import map_rows
from d7_engine.logic.stats import (
    SummaryStats,
    aging_distribution,
    column_totals,
    compute_summary_stats,
    counts_by_business_type,
    counts_by_status,
    status_flags,
)


@pytest.fixture
def records(sample_csv, today):
    return map_rows(parse_csv_text(sample_csv), today=today)


def test_summary_stats(records):
    stats = compute_summary_stats(records)

    assert stats.total_records == 3
    assert stats.total_base_value == pytest.approx(sum(r.tax_base for r in records))
    assert stats.total_base_value == pytest.approx(21000.5)
    assert stats.total_vat == pytest.approx(1470.04)
    assert stats.total_product_value == pytest.approx(22970.54)
    assert stats.average_aging == pytest.approx(121 / 3)
    # 30 days is not overdue, 91 is
    assert stats.overdue_count == 1


def test_summary_stats_empty():
    assert compute_summary_stats([]) == SummaryStats()
    assert compute_summary_stats([]).average_aging == 0


def test_column_totals_match_summary(records):
    totals = column_totals(records)
    stats = compute_summary_stats(records)
    assert totals.tax_base == pytest.approx(stats.total_base_value)
    assert totals.input_vat == pytest.approx(stats.total_vat)
    assert totals.product_value == pytest.approx(stats.total_product_value)


def test_aging_distribution(records):
    assert aging_distribution(records) == [
        ("0-15 วัน", 1),
        ("16-30 วัน", 1),
        ("31-60 วัน", 0),
        ("60+ วัน", 1),
    ]


def test_business_type_top_n(today):
    rows = [["h"]]
    rows += [["A", "x", "", "", "", "", "", ""]] * 1
    rows += [["B", "x", "", "", "", "", "", ""]] * 3
    rows += [["", "x", "", "", "", "", "", ""]] * 2
    rows += [["C", "x", "", "", "", "", "", ""]] * 2
    records = map_rows(rows, today=today)

    assert counts_by_business_type(records) == [("B", 3), ("ไม่ระบุ", 2), ("C", 2), ("A", 1)]
    assert counts_by_business_type(records, limit=2) == [("B", 3), ("ไม่ระบุ", 2)]


def test_counts_by_status_first_seen_order(records):
    assert counts_by_status(records) == [
        ("จ่ายชำระเงินแล้ว", 1),
        ("ยังไม่จ่ายชำระเงิน", 1),
        ("ไม่ระบุ", 1),
    ]


def test_status_flags(records):
    assert status_flags(records) == (True, True)
    assert status_flags(records[1:]) == (False, True)
    assert status_flags(records[:1]) == (True, False)
    assert status_flags([]) == (False, False)
