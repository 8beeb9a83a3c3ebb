# ui/layout.py
import streamlit as st

def apply_global_layout():
    st.markdown(
        """
        <style>
        /* Expand usable width */
        .block-container {
            padding-left: 2rem;
            padding-right: 2rem;
            max-width: 100%;
        }

        /* Brand accent line */
        .stApp {
            background: #FFF1F2;
            border-top: 6px solid #a21caf;
        }

        /* Tighten table filter inputs */
        div[data-testid="stTextInput"] input {
            font-size: 12px;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
