import numpy as np

def compute_risk(assets) -> float:
    """Allocation-weighted risk score: sum of allocation/100 * risk.

    No precondition on the allocations; an empty list scores 0.
    """
    if not assets:
        return 0.0
    w = np.array([a.allocation for a in assets], dtype=float) / 100.0
    r = np.array([a.risk for a in assets], dtype=float)
    return float(np.dot(w, r))

def round_risk(risk: float) -> float:
    # one decimal, as shown next to the allocation sliders
    return round(risk * 10) / 10

def blended_return(assets) -> float:
    """Allocation-weighted expected return, in percent."""
    if not assets:
        return 0.0
    w = np.array([a.allocation for a in assets], dtype=float) / 100.0
    mu = np.array([a.expected_return for a in assets], dtype=float)
    return float(np.dot(w, mu))
