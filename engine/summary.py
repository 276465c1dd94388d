"""Screen-share snapshot and side-by-side comparison table"""
import json
import pandas as pd
from .models import ProjectionInput, ProjectionOutput, ScenarioResult

# (label, ScenarioResult attribute)
COMPARISON_ROWS = [
    ("Cost per Lead", "cost_per_lead"),
    ("Leads", "lead_count"),
    ("Appointments", "appointment_count"),
    ("Cost per Appointment", "cost_per_appointment"),
    ("Closed", "closed_count"),
    ("Revenue", "revenue"),
]

def _scenario_block(s: ScenarioResult) -> dict:
    return {
        "cpl": s.cost_per_lead,
        "leads": s.lead_count,
        "appts": s.appointment_count,
        "cpa": s.cost_per_appointment,
        "revenue": s.revenue,
    }

def prospect_summary(inp: ProjectionInput, out: ProjectionOutput) -> dict:
    """Read-only snapshot shown to the prospect; values are unrounded"""
    return {
        "market": inp.market.name,
        "channel": inp.channel,
        "spend": inp.client_spend,
        "funded_media": out.applied_credit,
        "competitor": _scenario_block(out.competitor),
        "platform": _scenario_block(out.platform),
        "assumptions": {
            "appt_rate": inp.lead_to_appt_rate,
            "average_conversion_value": out.average_conversion_value,
            "commission_rate": inp.commission_rate,
            "market_avg_price": inp.market.reference_asset_price,
            "close_rate": inp.close_rate,
            "base_primary_cpl": inp.baseline_cost_primary,
            "base_secondary_cpl": inp.baseline_cost_secondary,
            "funded_cap": inp.funded_cap,
        },
    }

def summary_json(inp: ProjectionInput, out: ProjectionOutput) -> str:
    return json.dumps(prospect_summary(inp, out), indent=2)

def comparison_frame(out: ProjectionOutput) -> pd.DataFrame:
    """One row per metric: Competitor, Platform, Delta (platform - competitor)"""
    rows = []
    for label, attr in COMPARISON_ROWS:
        comp = getattr(out.competitor, attr)
        plat = getattr(out.platform, attr)
        rows.append({"Metric": label, "Competitor": comp, "Platform": plat, "Delta": plat - comp})
    return pd.DataFrame(rows, columns=["Metric", "Competitor", "Platform", "Delta"])
