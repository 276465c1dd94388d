"""Competitor vs platform media-buy projection"""
import logging
from .models import ProjectionInput, ProjectionOutput, ScenarioResult
from .metrics import leads_for_budget, cost_per, applied_credit

log = logging.getLogger("projection")

def _scenario(cpl: float, budget: float, leads: float, inp: ProjectionInput, acv: float) -> ScenarioResult:
    appts = leads * inp.lead_to_appt_rate
    closed = appts * inp.close_rate
    return ScenarioResult(
        cost_per_lead=cpl,
        lead_count=leads,
        appointment_count=appts,
        cost_per_appointment=cost_per(budget, appts),
        closed_count=closed,
        revenue=closed * acv,
    )

def project(inp: ProjectionInput) -> ProjectionOutput:
    """
    Project leads, appointments, closed deals and revenue for both scenarios.

    The competitor buys media with the client's spend at the market CPL. The
    platform buys with spend plus applied credit at a CPL reduced by
    efficiency_uplift. Pure and total: non-positive denominators give 0.
    """
    market = inp.market
    acv = market.reference_asset_price * inp.commission_rate

    competitor_cpl = inp.baseline_cost() * market.cost_multiplier
    platform_cpl = competitor_cpl * (1 - inp.efficiency_uplift)

    funded = applied_credit(inp.credit_a, inp.credit_b, inp.funded_cap)
    platform_budget = max(0.0, inp.client_spend) + funded

    competitor = _scenario(
        competitor_cpl, inp.client_spend,
        leads_for_budget(inp.client_spend, competitor_cpl), inp, acv,
    )
    platform = _scenario(
        platform_cpl, platform_budget,
        leads_for_budget(platform_budget, platform_cpl), inp, acv,
    )

    log.debug(
        "project market=%s channel=%s cpl=%.4f/%.4f budget=%.2f appts=%.4f/%.4f",
        market.name, inp.channel, competitor_cpl, platform_cpl, platform_budget,
        competitor.appointment_count, platform.appointment_count,
    )

    return ProjectionOutput(
        competitor=competitor,
        platform=platform,
        applied_credit=funded,
        platform_budget=platform_budget,
        appointment_delta=platform.appointment_count - competitor.appointment_count,
        revenue_delta=platform.revenue - competitor.revenue,
        cost_of_waiting=platform.revenue,  # revenue forfeited by delaying launch one period
        average_conversion_value=acv,
    )
