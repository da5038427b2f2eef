import pandas as pd

def results_to_frame(results):
    """Long format: one row per (year, asset)."""
    rows = []
    for r in results:
        for av in r.asset_values:
            rows.append({
                "year": r.year,
                "asset_id": av.asset_id,
                "asset_name": av.asset_name,
                "value": av.value,
                "interest": av.interest,
                "allocation": av.allocation,
                "rebalanced": r.rebalanced,
            })
    cols = ["year", "asset_id", "asset_name", "value", "interest", "allocation", "rebalanced"]
    return pd.DataFrame(rows, columns=cols)

def comparison_to_frame(comparison):
    cols = ["year", "interest", "value_end_of_year", "annual_investment",
            "total_interest", "total_amount_invested"]
    df = pd.DataFrame([{c: getattr(c_row, c) for c in cols} for c_row in comparison], columns=cols)
    return df.set_index("year")

def summary_frame(results, comparison=None):
    """Yearly portfolio totals, with the baseline alongside when given."""
    df = pd.DataFrame({
        "year": [r.year for r in results],
        "total_value": [r.total_value for r in results],
        "total_interest": [r.total_interest for r in results],
        "total_amount_invested": [r.total_amount_invested for r in results],
        "total_gain": [r.total_gain for r in results],
        "rebalanced": [r.rebalanced for r in results],
    }).set_index("year")
    if comparison:
        base = comparison_to_frame(comparison)
        df["baseline_value"] = base["value_end_of_year"]
        df["difference"] = df["total_value"] - df["baseline_value"]
    return df
