def leads_for_budget(budget: float, cpl: float) -> float:
    """Leads bought by a budget; 0 when either budget or CPL is non-positive"""
    return budget / cpl if budget > 0 and cpl > 0 else 0.0

def cost_per(total: float, count: float) -> float:
    """Cost per unit (CPA); 0 is the not-applicable sentinel when count <= 0"""
    return total / count if count > 0 else 0.0

def applied_credit(credit_a: float, credit_b: float, funded_cap: float) -> float:
    """Funded media actually used: negative credits count as 0, total capped"""
    return min(funded_cap, max(0.0, credit_a) + max(0.0, credit_b))
