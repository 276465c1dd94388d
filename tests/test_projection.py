"""Projection engine: reference scenarios, guards and identities"""
import math
from dataclasses import replace

import pytest

from engine.models import ProjectionInput, MarketEntry, PRIMARY, SECONDARY
from engine.markets import MARKET_TABLE, resolve_market
from engine.projection import project

def scenario_a():
    """NYC multiplier, Meta baseline 10, $1000 spend, no credits"""
    return ProjectionInput(
        market=MarketEntry("test", 1.35, 700_000), channel=PRIMARY,
        client_spend=1000, credit_a=0, credit_b=0, baseline_cost_primary=10,
        lead_to_appt_rate=0.2, efficiency_uplift=0.15,
    )

def scenario_b():
    """Baseline metro, Google baseline 100, $1500 spend + $500 credit"""
    return ProjectionInput(
        market=MarketEntry("test", 1.0, 330_000), channel=SECONDARY,
        client_spend=1500, credit_a=500, credit_b=0, baseline_cost_secondary=100,
        lead_to_appt_rate=0.27, efficiency_uplift=0.3,
    )

def test_scenario_a_competitor_and_platform():
    out = project(scenario_a())
    assert round(out.competitor.cost_per_lead, 3) == pytest.approx(13.5, abs=1e-3)
    assert round(out.platform.cost_per_lead, 3) == pytest.approx(11.475, abs=1e-3)
    assert round(out.competitor.lead_count, 3) == pytest.approx(74.074, abs=1e-3)
    assert round(out.competitor.appointment_count, 3) == pytest.approx(14.815, abs=1e-3)
    # no credit: platform budget is spend alone, 1000 / 11.475
    assert out.platform_budget == 1000
    assert round(out.platform.lead_count, 3) == pytest.approx(87.146, abs=1e-3)
    assert round(out.platform.appointment_count, 3) == pytest.approx(17.429, abs=1e-3)

def test_scenario_b_with_credit():
    out = project(scenario_b())
    assert abs(out.competitor.cost_per_lead - 100) < 1e-9
    assert abs(out.platform.cost_per_lead - 70) < 1e-9
    assert abs(out.competitor.lead_count - 15) < 1e-9
    assert round(out.platform.lead_count, 4) == pytest.approx(28.5714, abs=1e-4)
    assert round(out.competitor.appointment_count, 2) == pytest.approx(4.05, abs=1e-9)
    assert round(out.platform.appointment_count, 4) == pytest.approx(7.7143, abs=1e-4)
    assert out.platform_budget == 2000

def test_channel_selects_baseline():
    inp = ProjectionInput(market=MarketEntry("flat", 1.0, 350_000))
    assert project(replace(inp, channel=PRIMARY)).competitor.cost_per_lead == inp.baseline_cost_primary
    assert project(replace(inp, channel=SECONDARY)).competitor.cost_per_lead == inp.baseline_cost_secondary

def test_funded_cap_enforced():
    """Credits 1000 + 800 against a 1300 cap apply 1300, not 1800"""
    out = project(ProjectionInput(credit_a=1000, credit_b=800, funded_cap=1300))
    assert out.applied_credit == 1300
    assert out.platform_budget == 1000 + 1300

def test_negative_credits_clamp_to_zero():
    out = project(ProjectionInput(credit_a=-200, credit_b=-50, funded_cap=1300))
    assert out.applied_credit == 0
    assert out.platform_budget == 1000

def test_one_negative_credit_does_not_offset_the_other():
    out = project(ProjectionInput(credit_a=-400, credit_b=300, funded_cap=1300))
    assert out.applied_credit == 300

@pytest.mark.parametrize("a,b,cap", [
    (0, 0, 0), (500, 0, 1300), (1e6, 1e6, 1300), (-1e6, 5, 1300), (-1, -1, 0), (250.5, 250.5, 400),
])
def test_applied_credit_within_bounds(a, b, cap):
    out = project(ProjectionInput(credit_a=a, credit_b=b, funded_cap=cap))
    assert 0 <= out.applied_credit <= cap

def test_zero_spend_yields_zero_competitor():
    out = project(ProjectionInput(client_spend=0))
    assert out.competitor.lead_count == 0
    assert out.competitor.appointment_count == 0
    assert out.competitor.cost_per_appointment == 0
    assert out.competitor.revenue == 0
    # platform still runs on credit alone
    assert out.platform_budget == 500
    assert out.platform.lead_count > 0

def test_negative_spend_is_guarded():
    out = project(ProjectionInput(client_spend=-500, credit_a=0))
    assert out.platform_budget == 0
    for s in (out.competitor, out.platform):
        assert s.lead_count == 0
        assert s.cost_per_appointment == 0
        assert math.isfinite(s.revenue)

def test_zero_cpl_is_guarded():
    inp = ProjectionInput(market=MarketEntry("free", 0.0, 350_000))
    out = project(inp)
    assert out.competitor.cost_per_lead == 0
    assert out.competitor.lead_count == 0
    assert out.platform.lead_count == 0
    assert out.platform.cost_per_appointment == 0

def test_zero_appt_rate_gives_zero_cpa():
    out = project(ProjectionInput(lead_to_appt_rate=0))
    assert out.competitor.lead_count > 0
    assert out.competitor.appointment_count == 0
    assert out.competitor.cost_per_appointment == 0
    assert out.platform.cost_per_appointment == 0

def test_cpa_uses_spend_and_budget():
    out = project(scenario_b())
    assert out.competitor.cost_per_appointment == pytest.approx(1500 / out.competitor.appointment_count)
    assert out.platform.cost_per_appointment == pytest.approx(2000 / out.platform.appointment_count)

def test_zero_uplift_platform_cpl_equals_competitor():
    for market in MARKET_TABLE:
        out = project(ProjectionInput(market=market, efficiency_uplift=0))
        assert out.platform.cost_per_lead == out.competitor.cost_per_lead

def test_platform_cpl_relation():
    for uplift in (0.0, 0.15, 0.3, 0.5):
        out = project(ProjectionInput(efficiency_uplift=uplift))
        assert out.platform.cost_per_lead == pytest.approx(out.competitor.cost_per_lead * (1 - uplift))

def test_average_conversion_value():
    out = project(ProjectionInput(market=MarketEntry("x", 1.0, 400_000), commission_rate=0.025))
    assert out.average_conversion_value == 10_000
    out = project(ProjectionInput(market=MarketEntry("x", 1.0, 500_000), commission_rate=0.03))
    assert out.average_conversion_value == pytest.approx(15_000)

def test_cost_of_waiting_is_platform_revenue():
    for inp in (ProjectionInput(), scenario_a(), scenario_b(), ProjectionInput(client_spend=0, credit_a=0)):
        out = project(inp)
        assert out.cost_of_waiting == out.platform.revenue

def test_revenue_chain():
    """Appointments -> Closed -> ACV for the default input"""
    inp = ProjectionInput()
    out = project(inp)
    assert inp.market.name == "New York, NY"
    assert out.competitor.cost_per_lead == pytest.approx(21.6)
    assert out.platform.cost_per_lead == pytest.approx(18.36)
    assert out.platform_budget == 1500
    assert out.average_conversion_value == pytest.approx(17_500)
    for s in (out.competitor, out.platform):
        assert s.closed_count == pytest.approx(s.appointment_count * 0.25)
        assert s.revenue == pytest.approx(s.closed_count * 17_500)
    assert out.competitor.revenue == pytest.approx(1000 / 21.6 * 0.2 * 0.25 * 17_500)

def test_deltas():
    out = project(ProjectionInput())
    assert out.appointment_delta == out.platform.appointment_count - out.competitor.appointment_count
    assert out.revenue_delta == out.platform.revenue - out.competitor.revenue
    assert out.revenue_delta > 0

def test_delta_can_be_negative():
    """With no efficiency gain the platform only matches, and a negative cap makes it trail"""
    out = project(ProjectionInput(efficiency_uplift=0, credit_a=0, credit_b=0))
    assert out.appointment_delta == 0
    out = project(ProjectionInput(efficiency_uplift=0, credit_a=500, funded_cap=-200))
    assert out.appointment_delta < 0
    assert out.revenue_delta < 0

def test_out_of_range_uplift_propagates():
    out = project(ProjectionInput(efficiency_uplift=1.5))
    assert out.platform.cost_per_lead < 0
    assert out.platform.lead_count == 0

def test_unknown_market_uses_default_entry():
    out = project(ProjectionInput(market=resolve_market("Gotham, NY")))
    assert out.competitor.cost_per_lead == 16
    assert out.average_conversion_value == pytest.approx(350_000 * 0.025)

def test_project_is_deterministic_and_input_unchanged():
    inp = scenario_b()
    before = replace(inp)
    assert project(inp) == project(inp)
    assert inp == before

def test_to_dict_mirrors_fields():
    d = project(ProjectionInput()).to_dict()
    assert set(d) == {
        "competitor", "platform", "applied_credit", "platform_budget",
        "appointment_delta", "revenue_delta", "cost_of_waiting", "average_conversion_value",
    }
    assert set(d["platform"]) == {
        "cost_per_lead", "lead_count", "appointment_count",
        "cost_per_appointment", "closed_count", "revenue",
    }
