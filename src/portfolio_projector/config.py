from dataclasses import dataclass
from typing import Tuple

# Allowed deviation of the allocation total from 100 (percentage points)
ALLOCATION_TOLERANCE = 0.01

@dataclass(frozen=True)
class AssetClass:
    id: str
    name: str
    expected_return: float  # annual %, e.g. 8 = 8%
    allocation: float       # % of portfolio, 0..100
    risk: float             # 1..10

@dataclass(frozen=True)
class PortfolioAllocation:
    initial_investment: float
    annual_investment: float
    duration: int                   # years
    assets: Tuple[AssetClass, ...]
    rebalancing_frequency: int = 0  # 0=never, N=every N years

    def __post_init__(self):
        # accept any sequence, store an immutable snapshot
        object.__setattr__(self, "assets", tuple(self.assets))

    def allocation_vector(self):
        import numpy as np
        return np.array([a.allocation for a in self.assets], dtype=float)

    def returns_vector(self):
        import numpy as np
        return np.array([a.expected_return for a in self.assets], dtype=float)

    def asset_ids(self):
        return [a.id for a in self.assets]

DEFAULT_ASSET_CLASSES = (
    AssetClass("stocks", "Stocks", 8.0, 60.0, 7.0),
    AssetClass("bonds", "Bonds", 3.0, 30.0, 3.0),
    AssetClass("real_estate", "Real Estate", 5.0, 10.0, 5.0),
)

DEFAULTS = {
    "initial_investment": 1000.0,
    "annual_investment": 100.0,
    "duration": 10,
    "rebalancing_frequency": 3,
}
