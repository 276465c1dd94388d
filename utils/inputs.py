"""Input layer: turn raw widget/text values into a ProjectionInput."""

import logging
import math
from dataclasses import fields

from config.default_params import INPUT_BOUNDS
from engine.markets import DEFAULT_MARKET, resolve_market
from engine.models import ProjectionInput, CHANNELS, PRIMARY

log = logging.getLogger("inputs")

NUMERIC_FIELDS = [f.name for f in fields(ProjectionInput) if f.name not in ("market", "channel")]


def to_float(raw, default):
    """
    Coerce a number or numeric string to float.

    Returns (value, warning). Empty, non-numeric or non-finite input falls back
    to `default` and the warning explains why; otherwise warning is "".
    """
    if isinstance(raw, bool):
        return float(default), f"WARN: boolean {raw!r} is not a number, using {default}"
    if isinstance(raw, (int, float)):
        text = raw
    else:
        text = str(raw).strip().replace(",", "").lstrip("$") if raw is not None else ""
        if not text:
            return float(default), f"WARN: empty value, using {default}"
    try:
        value = float(text)
    except OverflowError:
        return float(default), f"WARN: {raw!r} is too large, using {default}"
    except ValueError:
        return float(default), f"WARN: {raw!r} is not a number, using {default}"
    if not math.isfinite(value):
        return float(default), f"WARN: {raw!r} is not finite, using {default}"
    return value, ""


def clamp(value, lo=None, hi=None):
    """Clamp to [lo, hi] (either bound may be None). Returns (value, warning)."""
    if lo is not None and value < lo:
        return lo, f"WARN: {value} below minimum {lo}, clamping"
    if hi is not None and value > hi:
        return hi, f"WARN: {value} exceeds maximum {hi}, clamping"
    return value, ""


def build_input(raw):
    """
    Build a ProjectionInput from a mapping of raw values.

    Recognised keys are the ProjectionInput field names, with `market` given as
    a market name. Missing keys keep the dataclass defaults. Returns
    (ProjectionInput, warnings).
    """
    defaults = ProjectionInput()
    warnings = []
    values = {}

    if "market" in raw:
        values["market"] = resolve_market(raw["market"])
        if values["market"] is DEFAULT_MARKET:
            warnings.append(f"WARN: unknown market {raw['market']!r}, using default multiplier and price")

    channel = raw.get("channel", defaults.channel)
    if channel not in CHANNELS:
        warnings.append(f"WARN: unknown channel {channel!r}, using {PRIMARY}")
        channel = PRIMARY
    values["channel"] = channel

    for name in NUMERIC_FIELDS:
        default = getattr(defaults, name)
        if name not in raw:
            continue
        value, warning = to_float(raw[name], default)
        if warning:
            warnings.append(f"{name}: {warning}")
        lo, hi = INPUT_BOUNDS.get(name, (None, None))
        value, warning = clamp(value, lo, hi)
        if warning:
            warnings.append(f"{name}: {warning}")
        values[name] = value

    for w in warnings:
        log.warning(w)
    return ProjectionInput(**values), warnings
