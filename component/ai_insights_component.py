# component/ai_insights_component.py

from __future__ import annotations

from html import escape

import streamlit as st

from d7_engine.logic.insights import PLACEHOLDER_TEXT, generate_insights
from d7_engine.logic.stats import SummaryStats

INSIGHTS_STATE_KEY = "d7_ai_insights"


def render_ai_insights(stats: SummaryStats) -> None:
    """
    AI executive insights panel. The last answer is kept in session_state
    until the next request; a data refresh clears it.
    """
    col_btn, col_body = st.columns([1, 5], gap="large")

    with col_btn:
        st.markdown("### ✨")
        clicked = st.button(
            "เริ่มการวิเคราะห์ AI",
            key="d7_ai_analyze",
            disabled=stats.total_records == 0,
        )

    if clicked:
        with st.spinner("กำลังวิเคราะห์..."):
            result = generate_insights(stats)
        if result is not None:
            st.session_state[INSIGHTS_STATE_KEY] = result

    with col_body:
        text = st.session_state.get(INSIGHTS_STATE_KEY) or PLACEHOLDER_TEXT
        body = escape(text).replace("\n", "<br/>")
        st.markdown(
            f"""
            <div class="d7-insights-label">AI EXECUTIVE INSIGHTS</div>
            <div class="d7-insights-body">{body}</div>
            """,
            unsafe_allow_html=True,
        )
