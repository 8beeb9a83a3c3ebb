# component/summary_cards_component.py

from __future__ import annotations

from html import escape
from typing import Any, Dict, List

import streamlit as st

from d7_engine.logic.stats import SummaryStats


def build_summary_cards(stats: SummaryStats) -> List[Dict[str, Any]]:
    """Card payloads in display order. Kept separate from rendering so it can be tested."""
    return [
        {
            "title": "รายการทั้งหมด",
            "value": f"{stats.total_records:,}",
            "suffix": "รายการ",
            "icon": "✅",
            "bg": "linear-gradient(135deg,#faf5ff,#f3e8ff)",
            "text": "#581c87",
        },
        {
            "title": "รวมมูลค่าฐานภาษี",
            "value": f"{stats.total_base_value:,.0f}",
            "suffix": "บาท",
            "icon": "🧮",
            "bg": "linear-gradient(135deg,#fdf2f8,#fce7f3)",
            "text": "#831843",
        },
        {
            "title": "ยอดรวมภาษีซื้อ",
            "value": f"{stats.total_vat:,.0f}",
            "suffix": "บาท",
            "icon": "📈",
            "bg": "linear-gradient(135deg,#f3e8ff,#e9d5ff)",
            "text": "#3b0764",
        },
        {
            "title": "รวมมูลค่าสินค้า",
            "value": f"{stats.total_product_value:,.0f}",
            "suffix": "บาท",
            "icon": "🛍️",
            "bg": "linear-gradient(135deg,#f8fafc,#f1f5f9)",
            "text": "#0f172a",
        },
        {
            "title": "เฉลี่ยวันคงค้าง",
            "value": f"{stats.average_aging:.1f}",
            "suffix": "วัน",
            "icon": "⏱️",
            "bg": "linear-gradient(135deg,#eef2ff,#e0e7ff)",
            "text": "#312e81",
        },
        {
            "title": "เกิน 30 วัน",
            "value": f"{stats.overdue_count:,}",
            "suffix": "รายการ",
            "icon": "⚠️",
            "bg": "linear-gradient(135deg,#fff1f2,#ffe4e6)",
            "text": "#881337",
        },
    ]


def render_summary_cards(stats: SummaryStats) -> None:
    cards = build_summary_cards(stats)
    columns = st.columns(len(cards), gap="small")
    for col, card in zip(columns, cards):
        with col:
            st.markdown(
                f"""
                <div class="d7-kpi-card" style="background:{card['bg']};">
                  <div class="d7-kpi-icon">{card['icon']}</div>
                  <div class="d7-kpi-title" style="color:{card['text']};">{escape(card['title'])}</div>
                  <div class="d7-kpi-value" title="{escape(card['value'])}">{escape(card['value'])}</div>
                  <div class="d7-kpi-suffix" style="color:{card['text']};">{escape(card['suffix'])}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )
