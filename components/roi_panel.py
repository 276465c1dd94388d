"""ROI snapshot, prospect summary and glossary panels."""

import streamlit as st
from config.default_params import GLOSSARY, UI_TEXT
from engine.summary import summary_json
from utils.formatting import money, count


def render_roi_snapshot(out):
    st.subheader("ROI Snapshot")
    st.caption("Revenue math based on Appointments -> Closed -> ACV (average client value).")
    c1, c2 = st.columns(2)
    with c1:
        st.metric("Closed (Competitor)", count(out.competitor.closed_count, 2))
        st.metric("Monthly Revenue (Competitor)", money(out.competitor.revenue))
        st.metric("Cost of Waiting 30 Days", money(out.cost_of_waiting))
    with c2:
        st.metric("Closed (Platform)", count(out.platform.closed_count, 2))
        st.metric("Monthly Revenue (Platform)", money(out.platform.revenue))
        st.metric("Delta Revenue (Platform - Competitor)", money(out.revenue_delta))
    st.caption(UI_TEXT['roi_note'])


def render_prospect_summary(inp, out):
    st.subheader("Prospect Summary (Display Only)")
    st.code(summary_json(inp, out), language="json")
    st.caption(UI_TEXT['summary_note'])


def render_glossary():
    with st.expander("📖 Glossary"):
        c1, c2 = st.columns(2)
        half = (len(GLOSSARY) + 1) // 2
        for col, terms in ((c1, GLOSSARY[:half]), (c2, GLOSSARY[half:])):
            with col:
                for term, definition in terms:
                    st.markdown(f"**{term}** — {definition}")
