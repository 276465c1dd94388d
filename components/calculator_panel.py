"""Calculator controls and headline stats."""

import streamlit as st
from config.default_params import CHANNEL_LABELS, APPT_RATE_PRESETS, EFFICIENCY_PRESETS
from engine.markets import market_names, resolve_market
from engine.models import ProjectionInput
from utils.formatting import money, count, signed, pct, cpa_display


def _preset_index(presets, value):
    values = list(presets.values())
    return values.index(value) if value in values else 0


def render_controls():
    """Render input widgets and return the raw values keyed by ProjectionInput field."""
    d = ProjectionInput()
    c1, c2, c3 = st.columns(3)

    with c1:
        market = st.selectbox("Metro", market_names(), index=0,
                              help="Market where ads run; affects CPL via multiplier and ACV via home price.")
        m = resolve_market(market)
        st.caption(f"Metro avg price: {money(m.reference_asset_price)}; CPL mult: ×{m.cost_multiplier:.2f}")
        channel = st.selectbox("Channel", list(CHANNEL_LABELS), format_func=CHANNEL_LABELS.get,
                               help="Meta (FB/IG) or Google Search.")
        spend = st.number_input("Monthly Client Spend ($)", min_value=0.0, value=d.client_spend, step=100.0,
                                help="Client-paid ad spend per month.")
        funded_cap = st.number_input("Funded Cap ($)", min_value=0.0, value=d.funded_cap, step=100.0,
                                     help="Max total credit used in projections.")

    with c2:
        credit_a = st.number_input("Media Credit ($)", min_value=0.0, value=d.credit_a, step=50.0,
                                   help="Platform-funded ad spend applied to campaigns.")
        credit_b = st.number_input("Growth Partner Credit ($)", min_value=0.0, value=d.credit_b, step=50.0,
                                   help="Additional funded media from partners.")
        appt_label = st.selectbox("Lead -> Appointment Rate", list(APPT_RATE_PRESETS),
                                  index=_preset_index(APPT_RATE_PRESETS, d.lead_to_appt_rate),
                                  help="% of leads that schedule an appointment.")
        uplift_label = st.selectbox("Platform Efficiency vs Competitor", list(EFFICIENCY_PRESETS),
                                    index=_preset_index(EFFICIENCY_PRESETS, d.efficiency_uplift),
                                    help="CPL improvement vs generic vendor.")

    with c3:
        base_primary = st.number_input("Meta Baseline CPL ($)", min_value=1.0, value=d.baseline_cost_primary,
                                       help="Typical CPL on Meta before multipliers.")
        base_secondary = st.number_input("Google Baseline CPL ($)", min_value=1.0, value=d.baseline_cost_secondary,
                                         help="Typical CPL on Google before multipliers.")
        commission = st.number_input("Commission Rate", min_value=0.0, max_value=1.0, value=d.commission_rate,
                                     step=0.001, format="%.3f",
                                     help="Commission applied to metro avg price to compute ACV.")
        close_rate = st.number_input("% appointments that close", min_value=0.0, max_value=1.0,
                                     value=d.close_rate, step=0.01,
                                     help="Share of booked appointments that become clients.")

    return {
        "market": market,
        "channel": channel,
        "client_spend": spend,
        "credit_a": credit_a,
        "credit_b": credit_b,
        "funded_cap": funded_cap,
        "lead_to_appt_rate": APPT_RATE_PRESETS[appt_label],
        "efficiency_uplift": EFFICIENCY_PRESETS[uplift_label],
        "baseline_cost_primary": base_primary,
        "baseline_cost_secondary": base_secondary,
        "commission_rate": commission,
        "close_rate": close_rate,
    }


def render_stats(inp, out):
    """Headline CPL / leads / appointments grid."""
    rate = pct(inp.lead_to_appt_rate)
    cols = st.columns(4)
    with cols[0]:
        st.metric("Competitor CPL (est.)", money(out.competitor.cost_per_lead))
        st.metric("Competitor Leads", count(out.competitor.lead_count))
        st.metric(f"Appointments @ {rate} (Competitor)", count(out.competitor.appointment_count))
    with cols[1]:
        st.metric("Platform CPL (est.)", money(out.platform.cost_per_lead))
        st.metric("Platform Leads", count(out.platform.lead_count))
        st.metric(f"Appointments @ {rate} (Platform)", count(out.platform.appointment_count),
                  delta=signed(out.appointment_delta))
    with cols[2]:
        st.metric("Funded Media (Credits)", money(out.applied_credit))
        st.metric("Platform Budget", money(out.platform_budget))
    with cols[3]:
        st.metric("Competitor Cost / Appt", cpa_display(out.competitor.cost_per_appointment))
        st.metric("Platform Cost / Appt", cpa_display(out.platform.cost_per_appointment))
    st.caption(
        f"ACV: {money(inp.market.reference_asset_price)} × {pct(inp.commission_rate, 2)} = "
        f"{money(out.average_conversion_value)}"
    )
