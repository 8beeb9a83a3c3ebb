# component/charts_component.py

from __future__ import annotations

from typing import Sequence

import streamlit as st

from d7_engine.logic.records import TaxRecord
from d7_engine.logic.stats import (
    aging_distribution,
    counts_by_business_type,
    counts_by_status,
    status_flags,
)
from ui.plotly_charts import (
    PLOTLY_CONFIG_MINIMAL,
    fig_aging_distribution,
    fig_business_type,
    fig_status_pie,
)


def render_charts_row(records: Sequence[TaxRecord]) -> None:
    col_aging, col_type, col_status = st.columns(3, gap="large")

    with col_aging:
        with st.container(border=True):
            st.markdown(
                '<p class="d7-chart-title">ช่วงเวลาคงค้าง (ไม่โอนภาษีนับจากวันที่ชำระเงิน) (Aging Analysis)</p>',
                unsafe_allow_html=True,
            )
            st.plotly_chart(
                fig_aging_distribution(aging_distribution(records)),
                use_container_width=True,
                config=PLOTLY_CONFIG_MINIMAL,
            )

    with col_type:
        with st.container(border=True):
            st.markdown('<p class="d7-chart-title">สัดส่วนตามประเภทธุรกิจ (Top 8)</p>', unsafe_allow_html=True)
            st.plotly_chart(
                fig_business_type(counts_by_business_type(records)),
                use_container_width=True,
                config=PLOTLY_CONFIG_MINIMAL,
            )

    with col_status:
        with st.container(border=True):
            st.markdown('<p class="d7-chart-title">สัดส่วนสถานะรายการ</p>', unsafe_allow_html=True)
            st.plotly_chart(
                fig_status_pie(counts_by_status(records)),
                use_container_width=True,
                config=PLOTLY_CONFIG_MINIMAL,
            )

            has_paid, has_unpaid = status_flags(records)
            if has_paid:
                st.markdown(
                    '<div class="d7-note">✔️ รายการที่ชำระแล้ว: <b>ให้เร่งโอนภาษีซื้อรอโอน (D7)</b></div>',
                    unsafe_allow_html=True,
                )
            if has_unpaid:
                st.markdown(
                    '<div class="d7-note">⚠️ ยังไม่ชำระเงิน: <b>ให้เร่งประสานงานจ่ายชำระ</b></div>',
                    unsafe_allow_html=True,
                )
