"""
Funded Media Projection Console - Streamlit UI
Internal live calculator for prospect calls; the engine is the single source of truth
"""

import hashlib
import json
import logging
from dataclasses import asdict
from datetime import datetime

import streamlit as st

from config.default_params import UI_TEXT
from config.log_config import configure_logging
from engine.projection import project
from engine.sensitivity import uplift_sweep, market_comparison_frame
from engine.summary import comparison_frame
from components.calculator_panel import render_controls, render_stats
from components.roi_panel import render_roi_snapshot, render_prospect_summary, render_glossary
from utils.inputs import build_input
from utils.visualizations import (
    create_scenario_comparison_chart,
    create_revenue_comparison_chart,
    create_uplift_sensitivity_chart,
)

log = logging.getLogger("console")

st.set_page_config(
    page_title="Projection Console",
    page_icon="📈",
    layout="wide"
)


def hash_input(inp):
    """Create hash of the input snapshot for caching"""
    inp_str = json.dumps(asdict(inp), sort_keys=True)
    return hashlib.md5(inp_str.encode()).hexdigest()


def get_engine_results(state, inp):
    """Projection, uplift sweep and metro table for inp; recomputed only when the input hash changes"""
    inp_hash = hash_input(inp)
    cached = state.get('engine')
    if cached is None or cached.get('hash') != inp_hash:
        cached = {
            'hash': inp_hash,
            'out': project(inp),
            'sweep': uplift_sweep(inp),
            'markets': market_comparison_frame(inp),
        }
        state['engine'] = cached
        log.debug("recomputed projection %s", inp_hash)
    return cached


def main():
    configure_logging()

    st.caption(f"{UI_TEXT['kicker']} · {UI_TEXT['tagline']}")
    st.title(UI_TEXT['title'])

    raw = render_controls()
    inp, warnings = build_input(raw)
    for w in warnings:
        st.warning(w)

    results = get_engine_results(st.session_state, inp)
    out = results['out']

    tab1, tab2, tab3 = st.tabs(["📊 Calculator", "💰 ROI Snapshot", "📋 Prospect Summary"])

    with tab1:
        render_stats(inp, out)
        c1, c2 = st.columns(2)
        with c1:
            st.plotly_chart(create_scenario_comparison_chart(out), use_container_width=True)
        with c2:
            st.plotly_chart(create_uplift_sensitivity_chart(results['sweep'], inp.efficiency_uplift),
                            use_container_width=True)

        with st.expander("🗺️ Same inputs in every metro"):
            st.dataframe(results['markets'], use_container_width=True, hide_index=True)

    with tab2:
        render_roi_snapshot(out)
        st.plotly_chart(create_revenue_comparison_chart(out), use_container_width=True)
        df = comparison_frame(out)
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.download_button(
            "Comparison (CSV)",
            data=df.to_csv(index=False).encode("utf-8"),
            file_name=f"Projection_{datetime.now().strftime('%Y%m%d')}.csv",
            mime="text/csv"
        )

    with tab3:
        render_prospect_summary(inp, out)

    render_glossary()
    st.divider()
    st.caption(UI_TEXT['footer'])


if __name__ == "__main__":
    main()
