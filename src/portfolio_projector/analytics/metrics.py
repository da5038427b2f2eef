import numpy as np

def cagr(balances, years: int):
    """Compound annual growth of the total balance (contributions included)."""
    balances = np.asarray(balances, dtype=float)
    start, end = balances[0], balances[-1]
    if start <= 0 or years <= 0:
        return np.nan
    return float((end / start) ** (1.0 / years) - 1.0)

def mwrr_irr(cashflows, balances):
    """Money-weighted annual return.

    cashflows: (T,) start-of-year contributions
    balances:  (T+1,) with balances[0] the initial investment and
               balances[-1] the final value
    """
    import numpy_financial as npf
    cashflows = np.asarray(cashflows, dtype=float)
    balances = np.asarray(balances, dtype=float)
    series = np.zeros(cashflows.shape[0] + 1)
    series[:-1] = -cashflows
    series[0] -= balances[0]
    series[-1] += balances[-1]
    return float(npf.irr(series))

def allocation_drift(results, assets):
    """(T,) largest absolute gap between reported and target allocation, per year."""
    targets = np.array([a.allocation for a in assets], dtype=float)
    live = np.array([[av.allocation for av in r.asset_values] for r in results], dtype=float)
    if live.size == 0:
        return np.zeros(0)
    return np.abs(live - targets[None, :]).max(axis=1)
