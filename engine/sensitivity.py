"""Re-run the projection across a grid of one input at a time"""
from dataclasses import replace
import numpy as np
import pandas as pd
from config.default_params import UPLIFT_SWEEP
from .models import ProjectionInput
from .markets import MARKET_TABLE
from .projection import project

def uplift_grid(**overrides):
    """np.linspace over UPLIFT_SWEEP; start/stop/num may be overridden"""
    params = {**UPLIFT_SWEEP, **overrides}
    return np.linspace(params['start'], params['stop'], params['num'])

def uplift_sweep(inp: ProjectionInput, uplifts=None) -> pd.DataFrame:
    """Platform vs competitor outcomes as efficiency_uplift varies, all else fixed"""
    if uplifts is None:
        uplifts = uplift_grid()
    rows = []
    for u in uplifts:
        out = project(replace(inp, efficiency_uplift=float(u)))
        rows.append({
            "efficiency_uplift": float(u),
            "platform_cpl": out.platform.cost_per_lead,
            "platform_appts": out.platform.appointment_count,
            "competitor_appts": out.competitor.appointment_count,
            "platform_revenue": out.platform.revenue,
            "competitor_revenue": out.competitor.revenue,
            "revenue_delta": out.revenue_delta,
        })
    return pd.DataFrame(rows)

def market_comparison_frame(inp: ProjectionInput) -> pd.DataFrame:
    """The same input projected in every market of the reference table"""
    rows = []
    for market in MARKET_TABLE:
        out = project(replace(inp, market=market))
        rows.append({
            "market": market.name,
            "cost_multiplier": market.cost_multiplier,
            "competitor_cpl": out.competitor.cost_per_lead,
            "platform_cpl": out.platform.cost_per_lead,
            "platform_appts": out.platform.appointment_count,
            "platform_revenue": out.platform.revenue,
            "revenue_delta": out.revenue_delta,
        })
    return pd.DataFrame(rows)
