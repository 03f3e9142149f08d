"""
CSV Risk Analyzer: Dashboard
============================

Upload a CSV of loan applications, preview it, and score up to 10 rows
against the risk classification API (or the local simulator).

Backend is picked from the environment (RISK_BACKEND=local|watson|gpt,
see core/config.py).

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

try:
    import altair as alt
    _HAS_ALTAIR = True
except ImportError:
    alt = None
    _HAS_ALTAIR = False

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import ScoringConfig
from core.schema import MAX_REQUEST_ROWS, RISK_LABELS
from core.log import get_logger

from data_prep.loader import SelectedFile

from scoring.clients import build_client
from scoring.session import AnalysisSession

logger = get_logger("app.streamlit_app")

PREVIEW_ROWS = 20

# Badge colours per CSS class, mirrors the risk legend
RISK_COLOURS = {
    "no-risk": "#2e7d32",
    "low-risk": "#9e9d24",
    "medium-risk": "#ef6c00",
    "high-risk": "#c62828",
    "unknown-risk": "#757575",
}


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------
@st.cache_resource(show_spinner=False)
def _load_config() -> ScoringConfig:
    return ScoringConfig.from_env()


def _get_session() -> AnalysisSession:
    """One AnalysisSession per browser session, built with the configured client."""
    if "analysis_session" not in st.session_state:
        client = build_client(_load_config())
        st.session_state["analysis_session"] = AnalysisSession(client)
    return st.session_state["analysis_session"]


def _upload_key(uploaded) -> tuple:
    return (uploaded.name, uploaded.size, getattr(uploaded, "file_id", None))


def _show_message(session: AnalysisSession) -> None:
    msg = session.message
    if msg is None:
        return
    if msg.type == "error":
        st.error(msg.text)
    else:
        st.success(msg.text)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_label_counts(results: pd.DataFrame, *, height=260):
    if len(results) == 0:
        st.info("No predictions to plot.")
        return
    counts = (
        results["Prediction"].value_counts()
        .reindex(list(RISK_LABELS) + ["Unknown"], fill_value=0)
        .rename_axis("Prediction").reset_index(name="Records")
    )
    counts = counts[counts["Records"] > 0]
    if not _HAS_ALTAIR:
        st.markdown("**Predictions by label**")
        import matplotlib.pyplot as plt
        fig, ax = plt.subplots(figsize=(6, 3))
        ax.bar(counts["Prediction"], counts["Records"], edgecolor="white", alpha=0.8)
        ax.set_ylabel("Records")
        st.pyplot(fig)
        return
    chart = (
        alt.Chart(counts).mark_bar(opacity=0.85)
        .encode(
            x=alt.X("Prediction:N", sort=list(RISK_LABELS) + ["Unknown"], title="Prediction"),
            y=alt.Y("Records:Q", title="Records"),
        )
        .properties(title="Predictions by label", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _badge(label: str, css_class: str) -> str:
    colour = RISK_COLOURS.get(css_class, RISK_COLOURS["unknown-risk"])
    return (
        f'<span class="{css_class}" style="background:{colour};color:white;'
        f'padding:2px 8px;border-radius:8px;">{label}</span>'
    )


# ═══════════════════════════════════════════════════════════════════════════
# PAGE
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="CSV Risk Analyzer", layout="wide")
st.title("CSV Risk Analyzer")

session = _get_session()
st.caption(f"Scoring engine: {session.client.engine or 'remote'} · up to {MAX_REQUEST_ROWS} rows per analysis")

# ═══════════════════════════════════════════════════════════════════════════
# FILE SELECTION
# ═══════════════════════════════════════════════════════════════════════════
uploaded = st.file_uploader("Select a CSV file (max 10MB)", type=["csv"], accept_multiple_files=False)

if uploaded is None:
    if st.session_state.get("upload_key") is not None:
        session.clear()
        st.session_state["upload_key"] = None
else:
    key = _upload_key(uploaded)
    if st.session_state.get("upload_key") != key:
        st.session_state["upload_key"] = key
        with st.spinner("Reading CSV..."):
            asyncio.run(session.select_file(SelectedFile.from_upload(uploaded)))

_show_message(session)

table = session.table
if table is not None:
    c1, c2, c3 = st.columns(3)
    c1.metric("Data Rows", f"{table.total_rows:,}")
    c2.metric("Columns", str(len(table.headers)))
    c3.metric("Rows to Analyze", str(table.analyzed_rows))

    preview = pd.DataFrame(list(table.records[:PREVIEW_ROWS]), columns=list(dict.fromkeys(table.headers)))
    st.dataframe(preview, use_container_width=True, hide_index=True)

    if session.validation is not None and session.validation.warnings:
        with st.expander(f"Data checks ({len(session.validation.warnings)} warnings)", expanded=False):
            st.text(session.validation.summary())

# ═══════════════════════════════════════════════════════════════════════════
# ANALYSIS
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
st.subheader("Risk Analysis")

analyze_clicked = st.button(
    "Analyze risk",
    type="primary",
    disabled=not session.can_analyze or session.is_analyzing,
)
if analyze_clicked:
    with st.spinner("Scoring records..."):
        asyncio.run(session.analyze())
    st.rerun()

norm = session.normalizer
if session.analysis_result is not None:
    results = norm.to_frame()
    if norm.model:
        st.caption(f"Model: {norm.model}")

    left, right = st.columns([3, 2])
    with left:
        for i in range(norm.record_count()):
            label = norm.prediction_label(i)
            st.markdown(
                f"**Record {i + 1}** &nbsp; {_badge(label, norm.label_css_class(label))}",
                unsafe_allow_html=True,
            )
            st.progress(
                min(int(round(norm.probability_percent(i, 0))), 100),
                text=f"Probability: {norm.probability_text(i, 0)}",
            )
    with right:
        _plot_label_counts(results)

    with st.expander("Results table", expanded=False):
        st.dataframe(results.drop(columns=["Class"]), use_container_width=True, hide_index=True)
    if session.last_request is not None:
        with st.expander("Request payload", expanded=False):
            st.json(session.last_request.to_wire())
