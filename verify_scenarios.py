#!/usr/bin/env python3
"""Print the reference projection scenarios so the numbers can be checked on a call"""

from dataclasses import replace

from config.log_config import configure_logging
from engine.models import ProjectionInput, MarketEntry, PRIMARY, SECONDARY
from engine.projection import project

SCENARIOS = {
    "A: NYC multiplier, $1000, 20%, 15% uplift": ProjectionInput(
        market=MarketEntry("New York, NY", 1.35, 700_000), channel=PRIMARY,
        client_spend=1000, credit_a=0, credit_b=0, baseline_cost_primary=10,
        lead_to_appt_rate=0.2, efficiency_uplift=0.15),
    "B: baseline metro, $1500 + $500 credit, 27%, 30% uplift": ProjectionInput(
        market=MarketEntry("Houston, TX", 1.0, 330_000), channel=SECONDARY,
        client_spend=1500, credit_a=500, credit_b=0, baseline_cost_secondary=100,
        lead_to_appt_rate=0.27, efficiency_uplift=0.3),
}

def verify_scenarios():
    print("=" * 60)
    print("REFERENCE PROJECTION SCENARIOS")
    print("=" * 60)
    for label, inp in SCENARIOS.items():
        out = project(inp)
        print(f"\n{label}")
        print(f"  CPL         competitor {out.competitor.cost_per_lead:10.3f}  platform {out.platform.cost_per_lead:10.3f}")
        print(f"  Leads       competitor {out.competitor.lead_count:10.4f}  platform {out.platform.lead_count:10.4f}")
        print(f"  Appts       competitor {out.competitor.appointment_count:10.4f}  platform {out.platform.appointment_count:10.4f}")
        print(f"  Revenue     competitor {out.competitor.revenue:10.2f}  platform {out.platform.revenue:10.2f}")

    capped = project(replace(ProjectionInput(), credit_a=1000, credit_b=800, funded_cap=1300))
    print(f"\nC: credits 1000 + 800, cap 1300 -> applied {capped.applied_credit:.0f}")
    clamped = project(replace(ProjectionInput(), credit_a=-200, credit_b=-50))
    print(f"D: credits -200 + -50 -> applied {clamped.applied_credit:.0f}")

if __name__ == "__main__":
    configure_logging()
    verify_scenarios()
