import numpy as np
from ..errors import ValidationError

def validate_amounts(initial: float, annual: float, duration):
    if not np.isfinite(initial) or initial < 0:
        raise ValidationError(f"Initial investment must be a finite amount >= 0, got {initial}")
    if not np.isfinite(annual) or annual < 0:
        raise ValidationError(f"Annual investment must be a finite amount >= 0, got {annual}")
    if isinstance(duration, bool) or not isinstance(duration, (int, np.integer)) or duration <= 0:
        raise ValidationError(f"Duration must be a positive whole number of years, got {duration!r}")

def build_contribution_vector(annual: float, duration: int):
    """Return a (duration,) vector of contributions, one per year (start of year)."""
    return np.full(int(duration), float(annual), dtype=float)
