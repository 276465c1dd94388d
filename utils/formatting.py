"""Display formatting for projection figures. Never applied to engine values in place."""

import math


def money(x):
    """$1,234.56; non-finite values show as $0.00"""
    if x is None or not math.isfinite(x):
        return "$0.00"
    return f"${x:,.2f}"


def count(x, digits=1):
    return f"{x:.{digits}f}"


def signed(x, digits=1):
    return f"{'+' if x >= 0 else ''}{x:.{digits}f}"


def pct(x, digits=0):
    return f"{x * 100:.{digits}f}%"


def cpa_display(x):
    """Cost per appointment, with an em dash for the 0 not-applicable sentinel"""
    return money(x) if x else "—"
