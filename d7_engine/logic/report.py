# logic/report.py
"""
Report pack export (PowerPoint) and CSV export of the records table.
"""
from __future__ import annotations

import io
from datetime import date
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from pptx import Presentation
from pptx.util import Inches, Pt

from ..logging_setup import get_logger
from .records import TaxRecord, records_to_frame
from .stats import SummaryStats, aging_distribution

logger = get_logger(__name__)

REPORT_TITLE = "Tax Follow-up : ระบบติดตามสถานะภาษีซื้อรอโอนคงค้าง (D7)"
REPORT_ORG = "แผนกประมวลผลและวิเคราะห์บัญชี • กฟก.3 นครปฐม"
AGING_BAR_COLORS = ["#94a3b8", "#f59e0b", "#ef4444", "#991b1b"]
TOP_OVERDUE_LIMIT = 10


def records_to_csv(records: Sequence[TaxRecord]) -> str:
    return records_to_frame(records).to_csv(index=False)


def records_to_csv_bytes(records: Sequence[TaxRecord]) -> bytes:
    # utf-8-sig so Excel opens the Thai headers correctly
    return records_to_csv(records).encode("utf-8-sig")


def _add_title_only_slide(prs, title_text: str):
    layout = prs.slide_layouts[5]  # Title Only
    slide = prs.slides.add_slide(layout)
    slide.shapes.title.text = title_text
    return slide


def _add_text_box(slide, left_in, top_in, width_in, height_in, text, font_size=14, bold=False):
    tx_box = slide.shapes.add_textbox(Inches(left_in), Inches(top_in), Inches(width_in), Inches(height_in))
    tf = tx_box.text_frame
    tf.word_wrap = True
    p = tf.paragraphs[0]
    p.text = text
    p.font.size = Pt(font_size)
    p.font.bold = bold
    return tx_box


def _add_chart_image(slide, fig, left_in, top_in, width_in):
    """Save a matplotlib fig to PNG in-memory and insert as picture."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    slide.shapes.add_picture(buf, Inches(left_in), Inches(top_in), width=Inches(width_in))


def _aging_chart(records: Sequence[TaxRecord]):
    bins = aging_distribution(records)
    # Default matplotlib fonts have no Thai glyphs
    labels = [name.replace(" วัน", "") + " d" for name, _ in bins]
    counts = [count for _, count in bins]

    fig, ax = plt.subplots(figsize=(7, 3.5))
    ax.bar(labels, counts, color=AGING_BAR_COLORS)
    ax.set_ylabel("Records")
    ax.set_title("Aging since payment date")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    return fig


def build_report_pack(
    records: Sequence[TaxRecord],
    stats: SummaryStats,
    insights: Optional[str] = None,
    generated_on: Optional[date] = None,
) -> bytes:
    """Build the D7 follow-up report as .pptx bytes, ready for st.download_button."""
    generated_on = generated_on or date.today()
    prs = Presentation()

    # Cover
    cover = prs.slides.add_slide(prs.slide_layouts[0])
    cover.shapes.title.text = REPORT_TITLE
    cover.placeholders[1].text_frame.text = f"{REPORT_ORG}\nข้อมูล ณ วันที่ {generated_on.strftime('%d/%m/%Y')}"

    # 1) Summary
    slide = _add_title_only_slide(prs, "1. สรุปภาพรวม")
    kpi_lines = [
        f"รายการทั้งหมด: {stats.total_records:,} รายการ",
        f"รวมมูลค่าฐานภาษี: {stats.total_base_value:,.2f} บาท",
        f"ยอดรวมภาษีซื้อ: {stats.total_vat:,.2f} บาท",
        f"รวมมูลค่าสินค้า: {stats.total_product_value:,.2f} บาท",
        f"เฉลี่ยวันคงค้าง: {stats.average_aging:.1f} วัน",
        f"เกิน 30 วัน: {stats.overdue_count:,} รายการ",
    ]
    _add_text_box(slide, 0.5, 1.5, 9.0, 4.5, "\n".join(f"• {line}" for line in kpi_lines), font_size=18)

    # 2) Aging chart
    slide = _add_title_only_slide(prs, "2. ช่วงเวลาคงค้าง (Aging Analysis)")
    _add_chart_image(slide, _aging_chart(records), 0.75, 1.5, 8.5)

    # 3) Oldest open items
    slide = _add_title_only_slide(prs, "3. รายการคงค้างนานที่สุด")
    oldest = sorted(records, key=lambda r: r.aging_days, reverse=True)[:TOP_OVERDUE_LIMIT]
    if oldest:
        lines = [
            f"• {r.aging_days} วัน | {r.vendor_name or '-'} | ใบกำกับ {r.tax_invoice_no or '-'} | ภาษีซื้อ {r.input_vat:,.2f}"
            for r in oldest
        ]
    else:
        lines = ["• ไม่มีรายการคงค้าง"]
    _add_text_box(slide, 0.5, 1.4, 9.0, 5.0, "\n".join(lines), font_size=12)

    # 4) AI insights (optional)
    if insights:
        slide = _add_title_only_slide(prs, "4. AI Executive Insights")
        _add_text_box(slide, 0.5, 1.4, 9.0, 5.0, insights, font_size=13)

    out = io.BytesIO()
    prs.save(out)
    logger.info("Built report pack: %d records, %d slides", len(records), len(prs.slides))
    return out.getvalue()
