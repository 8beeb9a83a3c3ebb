import io
from datetime import date

import pandas as pd
from pptx import Presentation

from d7_engine.logic.csv_parser import parse_csv_text
from d7_engine.logic.records import FIELD_LABELS, map_rows
from d7_engine.logic.report import build_report_pack, records_to_csv, records_to_csv_bytes
from d7_engine.logic.stats import compute_summary_stats


def _slide_texts(data: bytes):
    prs = Presentation(io.BytesIO(data))
    out = []
    for slide in prs.slides:
        texts = [shape.text_frame.text for shape in slide.shapes if shape.has_text_frame]
        out.append(" ".join(texts))
    return out


def _records(sample_csv, today):
    return map_rows(parse_csv_text(sample_csv), today=today)


def test_report_pack_slides(sample_csv, today):
    records = _records(sample_csv, today)
    data = build_report_pack(records, compute_summary_stats(records), generated_on=date(2025, 1, 31))

    slides = _slide_texts(data)
    assert len(slides) == 4
    assert "31/01/2025" in slides[0]
    assert "สรุปภาพรวม" in slides[1]
    assert "21,000.50" in slides[1]
    assert "Aging Analysis" in slides[2]
    # Oldest item first
    assert slides[3].index("91 วัน") < slides[3].index("30 วัน")


def test_report_pack_includes_insights_slide(sample_csv, today):
    records = _records(sample_csv, today)
    data = build_report_pack(records, compute_summary_stats(records), insights="1. เร่งโอนภาษีซื้อ")

    slides = _slide_texts(data)
    assert len(slides) == 5
    assert "AI Executive Insights" in slides[4]
    assert "เร่งโอนภาษีซื้อ" in slides[4]


def test_report_pack_with_no_records():
    data = build_report_pack([], compute_summary_stats([]))
    slides = _slide_texts(data)
    assert "ไม่มีรายการคงค้าง" in slides[3]


def test_csv_export_round_trips_through_pandas(sample_csv, today):
    records = _records(sample_csv, today)
    df = pd.read_csv(io.StringIO(records_to_csv(records)))

    assert list(df.columns) == list(FIELD_LABELS.values())
    assert df[FIELD_LABELS["vendor_name"]].tolist()[0] == "บริษัท เอ, จำกัด"


def test_csv_bytes_have_bom(sample_csv, today):
    data = records_to_csv_bytes(_records(sample_csv, today))
    assert data.startswith(b"\xef\xbb\xbf")
