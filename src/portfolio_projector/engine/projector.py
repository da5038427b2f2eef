import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..config import ALLOCATION_TOLERANCE
from ..errors import ValidationError
from .baseline import compare_allocation
from .cashflows import build_contribution_vector, validate_amounts
from .risk import compute_risk

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AssetYearValue:
    asset_id: str
    asset_name: str
    value: float
    interest: float     # earned this year
    allocation: float   # live % after growth, target % after a rebalance

@dataclass(frozen=True)
class PortfolioResult:
    year: int                               # 1-based
    asset_values: Tuple[AssetYearValue, ...]
    total_value: float
    total_interest: float                   # earned this year, all assets
    total_amount_invested: float            # cumulative principal
    rebalanced: bool

    @property
    def total_gain(self) -> float:
        return self.total_value - self.total_amount_invested

def validate_allocation(allocation):
    """Reject inputs the projection is not defined for.

    Allocations must add up to 100 within ALLOCATION_TOLERANCE; the error
    carries the actual total.
    """
    validate_amounts(allocation.initial_investment, allocation.annual_investment, allocation.duration)
    freq = allocation.rebalancing_frequency
    if isinstance(freq, bool) or not isinstance(freq, (int, np.integer)) or freq < 0:
        raise ValidationError(f"Rebalancing frequency must be a non-negative whole number of years, got {freq!r}")
    if not allocation.assets:
        raise ValidationError("At least one asset class is required")
    ids = allocation.asset_ids()
    dups = sorted({i for i in ids if ids.count(i) > 1})
    if dups:
        raise ValidationError(f"Duplicate asset ids: {dups}")
    for a in allocation.assets:
        if not np.isfinite(a.allocation) or not 0.0 <= a.allocation <= 100.0:
            raise ValidationError(f"Allocation of {a.id!r} must be between 0 and 100%, got {a.allocation}")
        if not np.isfinite(a.expected_return):
            raise ValidationError(f"Expected return of {a.id!r} must be a finite number, got {a.expected_return}")
    total = float(allocation.allocation_vector().sum())
    if not np.isfinite(total) or abs(total - 100.0) > ALLOCATION_TOLERANCE:
        logger.warning("Rejected allocation summing to %s%%", total)
        raise ValidationError(f"Asset allocations must sum to 100%, got {total:g}%", total=total)

def rebalance(values, targets, total: float):
    """Reset every asset to its target share of ``total``.

    values:  (N,) current asset values
    targets: (N,) target allocations in %
    Returns (new_values, new_allocations). The new values add up to ``total``;
    every asset is treated the same way whatever its target.
    """
    values = np.asarray(values, dtype=float)
    targets = np.asarray(targets, dtype=float)
    if values.shape != targets.shape:
        raise ValueError(f"Got {values.shape[0]} asset values for {targets.shape[0]} targets")
    s = targets.sum()
    w = targets / s if s > 0 else targets / 100.0
    return w * float(total), targets.copy()

def _snapshot(allocation, year, values, interest, live, total, rebalanced):
    assets = tuple(
        AssetYearValue(
            asset_id=a.id,
            asset_name=a.name,
            value=float(values[i]),
            interest=float(interest[i]),
            allocation=float(live[i]),
        )
        for i, a in enumerate(allocation.assets)
    )
    return PortfolioResult(
        year=year,
        asset_values=assets,
        total_value=total,
        total_interest=float(interest.sum()),
        total_amount_invested=float(allocation.initial_investment + allocation.annual_investment * year),
        rebalanced=rebalanced,
    )

def compute_projection(allocation) -> List[PortfolioResult]:
    """Project a PortfolioAllocation year by year.

    Each year: contribute at target weights, grow every asset at its own
    expected return, recompute the drifted allocation, then rebalance when
    the year is a multiple of the rebalancing frequency.
    """
    validate_allocation(allocation)
    targets = allocation.allocation_vector()
    w = targets / targets.sum()
    rates = allocation.returns_vector() / 100.0
    contributions = build_contribution_vector(allocation.annual_investment, allocation.duration)
    freq = int(allocation.rebalancing_frequency)
    logger.debug("Projecting %d assets over %d years (rebalance every %s)",
                 len(targets), allocation.duration, freq or "never")

    values = w * float(allocation.initial_investment)
    results = []
    for t in range(int(allocation.duration)):
        year = t + 1

        # 1) contribution split by target, not drifted, weights
        values = values + w * contributions[t]

        # 2) growth
        interest = values * rates
        values = values + interest
        total = float(values.sum())

        # 3) drift
        if total > 0:
            live = values / total * 100.0
        else:
            live = targets.copy()

        # 4) rebalance
        rebalanced = freq > 0 and year % freq == 0
        if rebalanced:
            values, live = rebalance(values, targets, total)
            logger.debug("Year %d: rebalanced %.2f to target weights", year, total)

        results.append(_snapshot(allocation, year, values, interest, live, total, rebalanced))
    return results

class PortfolioProjector:
    def __init__(self, allocation, include_comparison: bool = True):
        self.allocation = allocation
        self.include_comparison = bool(include_comparison)

    def run(self):
        """
        Returns dict with results, comparison, risk, balances, cashflows.
        balances: (duration+1,) year-end totals, balances[0] = initial investment
        cashflows: (duration,) yearly contributions
        """
        a = self.allocation
        results = compute_projection(a)
        balances = np.concatenate([[float(a.initial_investment)], [r.total_value for r in results]])
        return {
            "results": results,
            "comparison": compare_allocation(a) if self.include_comparison else None,
            "risk": compute_risk(a.assets),
            "balances": balances,
            "cashflows": build_contribution_vector(a.annual_investment, a.duration),
        }
