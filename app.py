from __future__ import annotations

from datetime import date
from typing import List, Optional

import streamlit as st

from d7_engine.config import get_settings
from d7_engine.data_layer import load_tax_records
from d7_engine.logging_setup import configure_logging, get_logger
from d7_engine.logic.records import TaxRecord
from d7_engine.logic.report import build_report_pack
from d7_engine.logic.stats import compute_summary_stats

from component.ai_insights_component import INSIGHTS_STATE_KEY, render_ai_insights
from component.charts_component import render_charts_row
from component.deadline_reminder_component import render_deadline_reminder
from component.records_table_component import render_records_table
from component.summary_cards_component import render_summary_cards
from ui.layout import apply_global_layout
from ui.streamlit_cards import inject_d7_card_css
from ui.styles import inject_global_d7_styles, page_footer, page_header

st.set_page_config(page_title="Tax Follow-up – D7", page_icon="🧾", layout="wide")

configure_logging()
logger = get_logger("d7_engine.app")
settings = get_settings()


@st.cache_data(show_spinner=False, ttl=settings.cache_ttl)
def load_records() -> List[TaxRecord]:
    # Raises on failure so a failed fetch is never cached
    return load_tax_records()


def current_records() -> List[TaxRecord]:
    try:
        return load_records()
    except Exception:
        logger.exception("Fetch Error")
        return []


@st.cache_data(show_spinner=False)
def report_pack_bytes(records: List[TaxRecord], insights: Optional[str]) -> bytes:
    return build_report_pack(records, compute_summary_stats(records), insights=insights)


# ---------- Chrome ----------
apply_global_layout()
inject_global_d7_styles()
inject_d7_card_css()

page_header(
    "Tax Follow-up :",
    "ระบบติดตามสถานะภาษีซื้อรอโอนคงค้าง (D7)",
    "แผนกประมวลผลและวิเคราะห์บัญชี • กฟก.3 นครปฐม",
)

# ---------- Data ----------
with st.spinner("กำลังโหลดข้อมูล..."):
    records = current_records()
stats = compute_summary_stats(records)

_, col_refresh, col_report = st.columns([6, 1, 1], gap="small")
with col_refresh:
    if st.button("🔄 รีเฟรชข้อมูล", use_container_width=True):
        load_records.clear()
        st.session_state.pop(INSIGHTS_STATE_KEY, None)
        st.rerun()
with col_report:
    st.download_button(
        label="⬇️ รายงาน",
        data=report_pack_bytes(records, st.session_state.get(INSIGHTS_STATE_KEY)),
        file_name=f"D7_TaxFollowup_{date.today().strftime('%Y%m%d')}.pptx",
        mime="application/vnd.openxmlformats-officedocument.presentationml.presentation",
        use_container_width=True,
        disabled=not records,
    )

if not records:
    logger.warning("Rendering dashboard with no records")
    st.warning("ไม่สามารถโหลดข้อมูลจาก Google Sheet ได้ หรือยังไม่มีรายการ (กดรีเฟรชเพื่อลองใหม่)")

# ---------- Dashboard ----------
render_summary_cards(stats)
render_deadline_reminder()
render_charts_row(records)

with st.container(border=True):
    render_ai_insights(stats)

with st.container(border=True):
    render_records_table(records)

page_footer([
    "TAX AI PLATFORM",
    "ระบบติดตามภาษีซื้อรอโอนคงค้าง (D7)",
    "แผนกประมวลผลและวิเคราะห์บัญชี • การไฟฟ้าส่วนภูมิภาคเขต 3 ภาคกลาง จังหวัดนครปฐม",
    f"© {date.today().year} Provincial Electricity Authority Region 3 Central. All Rights Reserved.",
])
