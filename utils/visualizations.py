"""Visualization utilities for the projection console."""

import plotly.graph_objects as go


def create_scenario_comparison_chart(out):
    """Leads, appointments and closed deals, competitor vs platform."""
    labels = ['Leads', 'Appointments', 'Closed']
    competitor = [out.competitor.lead_count, out.competitor.appointment_count, out.competitor.closed_count]
    platform = [out.platform.lead_count, out.platform.appointment_count, out.platform.closed_count]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=competitor,
        name='Competitor',
        marker_color='lightgray'
    ))
    fig.add_trace(go.Bar(
        x=labels,
        y=platform,
        name='Platform',
        marker_color='royalblue'
    ))
    fig.update_layout(
        title='Monthly Funnel: Competitor vs Platform',
        barmode='group',
        yaxis_title='Count',
        height=350
    )
    return fig


def create_revenue_comparison_chart(out):
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=['Competitor', 'Platform'],
        y=[out.competitor.revenue, out.platform.revenue],
        marker_color=['lightgray', 'green'],
        text=[f"${out.competitor.revenue:,.0f}", f"${out.platform.revenue:,.0f}"],
        textposition='outside'
    ))
    fig.update_layout(
        title='Monthly Revenue',
        yaxis_title='Revenue ($)',
        height=350,
        showlegend=False
    )
    return fig


def create_uplift_sensitivity_chart(sweep_df, current_uplift=None):
    """Platform vs competitor appointments across efficiency uplift values."""
    x = sweep_df['efficiency_uplift'] * 100
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x,
        y=sweep_df['platform_appts'],
        mode='lines+markers',
        name='Platform Appointments',
        line=dict(color='royalblue', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=x,
        y=sweep_df['competitor_appts'],
        mode='lines',
        name='Competitor Appointments',
        line=dict(color='gray', width=2, dash='dash')
    ))
    if current_uplift is not None:
        fig.add_vline(x=current_uplift * 100, line_dash="dot", line_color="orange",
                      annotation_text="Current")
    fig.update_layout(
        title='Appointments vs Platform Efficiency',
        xaxis_title='CPL Improvement (%)',
        yaxis_title='Appointments / Month',
        height=350
    )
    return fig
