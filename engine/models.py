from dataclasses import dataclass, field, asdict

PRIMARY = "primary"      # Meta (FB/IG)
SECONDARY = "secondary"  # Google Search
CHANNELS = (PRIMARY, SECONDARY)

@dataclass(frozen=True)
class MarketEntry:
    name: str
    cost_multiplier: float = 1.0
    reference_asset_price: float = 350_000.0  # metro average home value

def _first_market():
    from .markets import MARKET_TABLE
    return MARKET_TABLE[0]

@dataclass(frozen=True)
class ProjectionInput:
    market: MarketEntry = field(default_factory=_first_market)
    channel: str = PRIMARY
    client_spend: float = 1000.0        # monthly client-paid ad spend
    credit_a: float = 500.0             # media credit
    credit_b: float = 0.0               # growth partner credit
    funded_cap: float = 1300.0          # ceiling on credit_a + credit_b
    lead_to_appt_rate: float = 0.20
    efficiency_uplift: float = 0.15     # 15% lower CPL than competitor
    baseline_cost_primary: float = 16.0
    baseline_cost_secondary: float = 85.0
    commission_rate: float = 0.025
    close_rate: float = 0.25

    def baseline_cost(self) -> float:
        """Baseline CPL for the selected channel, before market scaling"""
        if self.channel == PRIMARY:
            return self.baseline_cost_primary
        return self.baseline_cost_secondary

@dataclass(frozen=True)
class ScenarioResult:
    cost_per_lead: float = 0.0
    lead_count: float = 0.0
    appointment_count: float = 0.0
    cost_per_appointment: float = 0.0   # 0 means not applicable
    closed_count: float = 0.0
    revenue: float = 0.0

@dataclass(frozen=True)
class ProjectionOutput:
    competitor: ScenarioResult
    platform: ScenarioResult
    applied_credit: float
    platform_budget: float
    appointment_delta: float
    revenue_delta: float
    cost_of_waiting: float              # one period of platform revenue
    average_conversion_value: float

    def to_dict(self) -> dict:
        return asdict(self)
