"""
Pure helpers for editing a list of asset classes while keeping the
allocations summing to 100.

Every function returns a new tuple of AssetClass and leaves its input alone.
Redistribution is proportional to the current allocations of the assets that
absorb the change, and equal when those are all zero.
"""
from dataclasses import replace
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from ..config import DEFAULT_ASSET_CLASSES, AssetClass
from ..errors import ValidationError


def default_asset_classes() -> Tuple[AssetClass, ...]:
    return tuple(DEFAULT_ASSET_CLASSES)


def allocation_total(assets: Sequence[AssetClass]) -> float:
    return float(sum(a.allocation for a in assets))


def _index_of(assets, asset_id: str) -> int:
    for i, a in enumerate(assets):
        if a.id == asset_id:
            return i
    raise ValidationError(f"Unknown asset id: {asset_id!r}")


def _spread(current: np.ndarray, amount: float) -> np.ndarray:
    """Split ``amount`` over slots in proportion to ``current``."""
    base = current.sum()
    if base > 0:
        return current / base * amount
    return np.full(current.shape, amount / len(current))


def redistribute(
    assets: Sequence[AssetClass],
    asset_id: str,
    new_allocation: float,
    locked: Iterable[str] = (),
) -> Tuple[AssetClass, ...]:
    """Set one asset's allocation and rebalance the other unlocked assets.

    The new allocation is clamped to what the locked assets leave free; the
    rest of 100 is shared by the other unlocked assets in proportion to their
    current allocations.
    """
    locked = set(locked)
    idx = _index_of(assets, asset_id)
    if asset_id in locked:
        raise ValidationError(f"Asset {asset_id!r} is locked")

    locked_total = sum(a.allocation for a in assets if a.id in locked)
    free = max(0.0, 100.0 - locked_total)
    target = min(max(float(new_allocation), 0.0), free)

    adjustable = [i for i, a in enumerate(assets) if i != idx and a.id not in locked]
    if not adjustable:
        if target != assets[idx].allocation:
            raise ValidationError(f"No unlocked asset can absorb a change to {asset_id!r}")
        return tuple(assets)

    current = np.array([assets[i].allocation for i in adjustable], dtype=float)
    shares = _spread(np.clip(current, 0.0, None), free - target)

    out = list(assets)
    out[idx] = replace(assets[idx], allocation=target)
    for i, share in zip(adjustable, shares):
        out[i] = replace(assets[i], allocation=float(share))
    return tuple(out)


def add_asset_class(
    assets: Sequence[AssetClass],
    name: Optional[str] = None,
    expected_return: float = 4.0,
    risk: float = 4.0,
) -> Tuple[AssetClass, ...]:
    """Append a new asset with a 0% allocation and the first free ``asset_<n>`` id."""
    taken = {a.id for a in assets}
    n = len(assets) + 1
    while f"asset_{n}" in taken:
        n += 1
    new = AssetClass(
        id=f"asset_{n}",
        name=name or f"Asset {len(assets) + 1}",
        expected_return=float(expected_return),
        allocation=0.0,
        risk=float(risk),
    )
    return tuple(assets) + (new,)


def remove_asset_class(
    assets: Sequence[AssetClass],
    asset_id: str,
    min_assets: int = 2,
) -> Tuple[AssetClass, ...]:
    """Drop an asset and hand its allocation to the rest, proportionally."""
    idx = _index_of(assets, asset_id)
    if len(assets) <= min_assets:
        raise ValidationError(f"A portfolio needs at least {min_assets} asset classes")

    removed = assets[idx].allocation
    remaining = [a for i, a in enumerate(assets) if i != idx]
    current = np.array([a.allocation for a in remaining], dtype=float)
    extra = _spread(np.clip(current, 0.0, None), removed)
    return tuple(replace(a, allocation=float(a.allocation + e)) for a, e in zip(remaining, extra))
