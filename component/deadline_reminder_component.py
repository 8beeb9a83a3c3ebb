# component/deadline_reminder_component.py
import streamlit as st

DEADLINE_TITLE = "6 เดือนคือ Deadline ถ้าไม่อยากเสียดาย ต้องรีบเคลม! ช้ากว่านี้ระวังโดนเบี้ยปรับ 2 เท่านะคะ"


def render_deadline_reminder() -> None:
    st.markdown(
        f"""
        <div class="d7-deadline">
          <div class="d7-deadline-inner">
            <p class="d7-deadline-title">📣 {DEADLINE_TITLE}</p>
            <p class="d7-deadline-body">
              โปรดระวัง!! ภาษีซื้อสามารถนำมาหักออกในการคำนวณภาษีได้ <u>ไม่เกิน 6 เดือน</u>
              นับแต่วันที่ถัดจากเดือนที่ออกใบกำกับภาษี
            </p>
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )
