# component/records_table_component.py

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

import streamlit as st

from d7_engine.logic.records import FIELD_LABELS, TaxRecord, records_to_frame
from d7_engine.logic.report import records_to_csv_bytes
from d7_engine.logic.stats import column_totals
from d7_engine.logic.view import COLUMNS, TableView, get_column, project, toggle_sort, with_filter, with_search

VIEW_STATE_KEY = "d7_table_view"

URGENCY_BADGE = {
    "critical": "🔴",
    "high": "🟠",
    "medium": "🟡",
    "low": "⚪",
}


def _current_view() -> TableView:
    view = st.session_state.get(VIEW_STATE_KEY)
    if not isinstance(view, TableView):
        view = TableView()
        st.session_state[VIEW_STATE_KEY] = view
    return view


def _render_controls(view: TableView) -> TableView:
    col_search, col_sort, col_dir = st.columns([3, 2, 1], gap="small")

    with col_search:
        search = st.text_input(
            "ค้นหา",
            value=view.search,
            placeholder="ค้นหาข้อมูลในตาราง...",
            key="d7_search",
            label_visibility="collapsed",
        )
        view = with_search(view, search)

    sort_keys = [c.key for c in COLUMNS]
    with col_sort:
        chosen = st.selectbox(
            "เรียงตาม",
            sort_keys,
            index=sort_keys.index(view.sort_key) if view.sort_key in sort_keys else 0,
            format_func=lambda k: get_column(k).label,
            key="d7_sort_key",
            label_visibility="collapsed",
        )
        if chosen != view.sort_key:
            view = toggle_sort(view, chosen)

    with col_dir:
        arrow = "⬇️ มาก→น้อย" if view.descending else "⬆️ น้อย→มาก"
        if st.button(arrow, key="d7_sort_dir", use_container_width=True):
            st.session_state[VIEW_STATE_KEY] = replace(view, descending=not view.descending)
            st.rerun()

    with st.expander("กรองรายคอลัมน์", expanded=False):
        filter_cols = st.columns(4, gap="small")
        current = dict(view.column_filters)
        for i, col in enumerate(COLUMNS):
            with filter_cols[i % 4]:
                text = st.text_input(
                    col.label,
                    value=current.get(col.key, ""),
                    placeholder="กรอง...",
                    key=f"d7_filter_{col.key}",
                )
                view = with_filter(view, col.key, text)

    return view


def render_records_table(records: Sequence[TaxRecord]) -> None:
    view = _render_controls(_current_view())
    st.session_state[VIEW_STATE_KEY] = view

    rows = project(records, view)
    st.caption(f"🔎 {len(rows):,} รายการ")

    df = records_to_frame(rows)
    # Urgency is shown as a colour dot in front of the aging value
    aging_label = FIELD_LABELS["aging_days"]
    df.insert(1, " ", [URGENCY_BADGE.get(r.urgency, "") for r in rows])
    df = df.drop(columns=[FIELD_LABELS["urgency"]])

    money = st.column_config.NumberColumn(format="%.2f")
    st.dataframe(
        df,
        hide_index=True,
        use_container_width=True,
        height=520,
        column_config={
            aging_label: st.column_config.NumberColumn(format="%d"),
            FIELD_LABELS["tax_base"]: money,
            FIELD_LABELS["input_vat"]: money,
            FIELD_LABELS["product_value"]: money,
        },
    )

    totals = column_totals(rows)
    st.markdown(
        f"""
        <div class="d7-totals">
          <span class="label">TOTAL SUM:</span>
          <span>{totals.tax_base:,.2f}</span>
          <span class="vat">{totals.input_vat:,.2f}</span>
          <span>{totals.product_value:,.2f}</span>
        </div>
        """,
        unsafe_allow_html=True,
    )

    st.download_button(
        label="⬇️ ดาวน์โหลดตาราง (CSV)",
        data=records_to_csv_bytes(rows),
        file_name="d7_tax_followup.csv",
        mime="text/csv",
        key="d7_download_csv",
    )
