"""Metro reference table: CPL multiplier and average home value per market"""
from .models import MarketEntry

# cost_multiplier = relative CPL multiplier; reference_asset_price = rough metro average home value (USD)
MARKET_TABLE = (
    MarketEntry("New York, NY", 1.35, 700_000),
    MarketEntry("San Francisco, CA", 1.35, 1_200_000),
    MarketEntry("Los Angeles, CA", 1.3, 900_000),
    MarketEntry("Miami, FL", 1.3, 600_000),
    MarketEntry("Boston, MA", 1.3, 800_000),
    MarketEntry("Washington, DC", 1.3, 750_000),
    MarketEntry("San Jose, CA", 1.3, 1_300_000),
    MarketEntry("Seattle, WA", 1.25, 850_000),
    MarketEntry("San Diego, CA", 1.25, 900_000),
    MarketEntry("Austin, TX", 1.2, 480_000),
    MarketEntry("Denver, CO", 1.2, 550_000),
    MarketEntry("Chicago, IL", 1.2, 360_000),
    MarketEntry("Philadelphia, PA", 1.2, 350_000),
    MarketEntry("Portland, OR", 1.2, 525_000),
    MarketEntry("Phoenix, AZ", 1.2, 450_000),
    MarketEntry("Dallas, TX", 1.15, 420_000),
    MarketEntry("Atlanta, GA", 1.15, 400_000),
    MarketEntry("Tampa, FL", 1.15, 380_000),
    MarketEntry("Charlotte, NC", 1.15, 380_000),
    MarketEntry("Nashville, TN", 1.15, 475_000),
    MarketEntry("Orlando, FL", 1.15, 380_000),
    MarketEntry("Houston, TX", 1.0, 330_000),
    MarketEntry("Minneapolis, MN", 1.0, 370_000),
    MarketEntry("Raleigh, NC", 1.0, 420_000),
    MarketEntry("Salt Lake City, UT", 1.0, 500_000),
    MarketEntry("Las Vegas, NV", 1.0, 430_000),
    MarketEntry("San Antonio, TX", 1.0, 320_000),
    MarketEntry("Columbus, OH", 1.0, 300_000),
    MarketEntry("Indianapolis, IN", 1.0, 290_000),
    MarketEntry("Cincinnati, OH", 1.0, 285_000),
    MarketEntry("Kansas City, MO", 1.0, 310_000),
    MarketEntry("St. Louis, MO", 1.0, 280_000),
    MarketEntry("Oklahoma City, OK", 0.9, 260_000),
    MarketEntry("Jacksonville, FL", 0.9, 325_000),
    MarketEntry("Cleveland, OH", 0.9, 220_000),
    MarketEntry("Pittsburgh, PA", 0.9, 275_000),
    MarketEntry("Milwaukee, WI", 0.9, 285_000),
    MarketEntry("San Juan, PR", 0.85, 300_000),
)

_BY_NAME = {m.name: m for m in MARKET_TABLE}

# Used when the requested market is not in the table
DEFAULT_MARKET = MarketEntry("", 1.0, 350_000)

def resolve_market(name) -> MarketEntry:
    """Exact (case-sensitive) lookup; unknown names get DEFAULT_MARKET"""
    if not isinstance(name, str):
        return DEFAULT_MARKET
    return _BY_NAME.get(name, DEFAULT_MARKET)

def market_names() -> list[str]:
    return [m.name for m in MARKET_TABLE]
