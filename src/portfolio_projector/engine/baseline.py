"""Single-rate "standard investment" used as the comparison baseline.

The baseline compounds the whole balance at one blended rate and adds the
annual contribution after the year's interest, with no per-asset breakdown
and no rebalancing.
"""
from dataclasses import dataclass
from typing import List

from .cashflows import validate_amounts
from .risk import blended_return

@dataclass(frozen=True)
class ComparisonYearResult:
    year: int
    interest: float              # earned this year
    value_end_of_year: float
    annual_investment: float
    total_interest: float        # cumulative
    total_amount_invested: float # cumulative principal

def compute_comparison(principal: float, annual_contribution: float,
                       duration_years: int, blended_rate: float) -> List[ComparisonYearResult]:
    validate_amounts(principal, annual_contribution, duration_years)
    rate = float(blended_rate) / 100.0
    value = float(principal)
    out = []
    for i in range(int(duration_years)):
        year = i + 1
        interest = value * rate
        value += interest
        value += annual_contribution
        invested = principal + annual_contribution * year
        out.append(ComparisonYearResult(
            year=year,
            interest=interest,
            value_end_of_year=value,
            annual_investment=float(annual_contribution),
            total_interest=value - invested,
            total_amount_invested=float(invested),
        ))
    return out

def compare_allocation(allocation) -> List[ComparisonYearResult]:
    """Baseline for a PortfolioAllocation, at its allocation-weighted return."""
    rate = blended_return(allocation.assets)
    return compute_comparison(allocation.initial_investment, allocation.annual_investment,
                              allocation.duration, rate)
