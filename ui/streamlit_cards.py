# ui/streamlit_cards.py
import streamlit as st

def inject_d7_card_css() -> None:
    st.markdown(
        """
<style>
/* --- D7 tokens --- */
:root{
  --bg-card:#FFFFFF;
  --bg-chart:#fdf2f8;
  --border:#fbcfe8;
  --text-h1:#0F172A;
  --text-h2:#1F2937;
  --text-muted:#64748B;
  --accent:#db2777;
  --radius:18px;
}

/* KPI card */
.d7-kpi-card{
  border: 1px solid var(--border);
  border-radius: var(--radius);
  padding: 16px;
  min-height: 132px;
}
.d7-kpi-icon{ font-size: 20px; }
.d7-kpi-title{
  font-size: 11px;
  font-weight: 800;
  text-transform: uppercase;
  letter-spacing: .04em;
  margin: 8px 0 4px 0;
}
.d7-kpi-value{
  font-size: 24px;
  font-weight: 800;
  color: var(--text-h1);
  line-height: 1.1;
  white-space: nowrap;
  overflow: hidden;
  text-overflow: ellipsis;
}
.d7-kpi-suffix{
  font-size: 11px;
  font-weight: 700;
  opacity: .7;
  margin-top: 2px;
}

/* Deadline banner */
.d7-deadline{
  background: linear-gradient(90deg, #db2777, #6b21a8);
  border-radius: 26px;
  padding: 4px;
  margin: 8px 0 32px 0;
}
.d7-deadline-inner{
  background: #FFFFFF;
  border-radius: 22px;
  padding: 22px 28px;
}
.d7-deadline-title{
  font-size: 20px;
  font-weight: 900;
  color: #581c87;
  margin: 0 0 6px 0;
}
.d7-deadline-body{
  font-size: 16px;
  font-weight: 700;
  color: #334155;
  margin: 0;
}
.d7-deadline-body u{ color: var(--accent); }

/* Chart shell */
.d7-chart-title{
  font-size:15px;
  font-weight:700;
  color: var(--text-h2);
  margin: 0 0 8px 0;
}

/* Status call-to-action notes */
.d7-note{
  border: 1px solid var(--border);
  border-radius: 14px;
  background: rgba(255,255,255,.7);
  padding: 10px 14px;
  margin-top: 8px;
  font-weight: 700;
  color: #581c87;
}
.d7-note b{ color: var(--accent); text-decoration: underline; }

/* AI insights */
.d7-insights-label{
  font-size: 12px;
  font-weight: 900;
  letter-spacing: .2em;
  color: #94a3b8;
  margin-bottom: 6px;
}
.d7-insights-body{
  font-size: 16px;
  line-height: 26px;
  color: #334155;
}

/* Footer totals */
.d7-totals{
  background:#0f172a;
  color:#FFFFFF;
  border-radius: 12px;
  padding: 14px 20px;
  font-weight: 800;
  display:flex;
  justify-content:flex-end;
  gap: 32px;
}
.d7-totals span.label{ color:#f472b6; letter-spacing:.2em; }
.d7-totals span.vat{ color:#f9a8d4; }
</style>
        """,
        unsafe_allow_html=True,
    )
