# ui/styles.py
from html import escape

import streamlit as st

def inject_global_d7_styles():
    st.markdown(
        """
        <style>
        /* ===============================
           Page header (GLOBAL)
           =============================== */

        .d7-page-header {
          background: #4a044e;
          border-radius: 16px;
          padding: 20px 28px;
          margin: 0 0 24px 0;
          display: flex;
          align-items: center;
          gap: 20px;
        }

        .d7-logo {
          width: 56px;
          height: 56px;
          background: #FFFFFF;
          border-radius: 14px;
          display: flex;
          align-items: center;
          justify-content: center;
          font-weight: 800;
          color: #4a044e;
          font-size: 18px;
        }

        .d7-h1 {
          font-size: 24px;
          line-height: 32px;
          font-weight: 800;
          color: #FFFFFF;
          margin: 0;
        }

        .d7-h1 span {
          color: #f9a8d4;
        }

        .d7-sub {
          font-size: 15px;
          line-height: 22px;
          font-weight: 600;
          color: #fce7f3;
          margin: 4px 0 0 0;
        }

        /* ===============================
           Footer (GLOBAL)
           =============================== */

        .d7-footer {
          text-align: center;
          color: #64748B;
          font-size: 12px;
          margin-top: 48px;
          padding-top: 24px;
          border-top: 4px solid #db2777;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def page_header(title: str, highlight: str, subtitle: str) -> None:
    st.markdown(
        f"""
        <div class="d7-page-header">
          <div class="d7-logo">TAX</div>
          <div>
            <p class="d7-h1">{escape(title)} <span>{escape(highlight)}</span></p>
            <p class="d7-sub">{escape(subtitle)}</p>
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def page_footer(lines) -> None:
    body = "<br/>".join(escape(line) for line in lines)
    st.markdown(f'<div class="d7-footer">{body}</div>', unsafe_allow_html=True)
