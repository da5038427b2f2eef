from portfolio_projector.config import AssetClass, PortfolioAllocation
from portfolio_projector.engine.projector import PortfolioProjector
from portfolio_projector.analytics.metrics import cagr, mwrr_irr, allocation_drift
from portfolio_projector.engine.risk import round_risk

def main():
    # 1) Portfolio
    assets = [
        AssetClass("stocks", "Stocks", 8.0, 60.0, 7.0),
        AssetClass("bonds", "Bonds", 3.0, 30.0, 3.0),
        AssetClass("real_estate", "Real Estate", 5.0, 10.0, 5.0),
    ]
    allocation = PortfolioAllocation(
        initial_investment=10_000,
        annual_investment=1_200,
        duration=30,
        assets=assets,
        rebalancing_frequency=3,
    )

    # 2) Run projection + baseline
    out = PortfolioProjector(allocation).run()
    results, comparison = out["results"], out["comparison"]

    # 3) Simple summary
    def pct(x): return f"{100*x:.2f}%"
    final, base = results[-1], comparison[-1]
    drift = allocation_drift(results, assets)
    print("=== Projection Summary (30 years, rebalance every 3) ===")
    print(f"Risk score: {round_risk(out['risk'])}")
    print(f"End value: ${final.total_value:,.0f}  invested: ${final.total_amount_invested:,.0f}")
    print(f"Baseline end value: ${base.value_end_of_year:,.0f}")
    print(f"CAGR: {pct(cagr(out['balances'], allocation.duration))}")
    print(f"Money-weighted return: {pct(mwrr_irr(out['cashflows'], out['balances']))}")
    print(f"Max allocation drift: {drift.max():.2f} pts")
    print("Rebalanced in years:", [r.year for r in results if r.rebalanced])


if __name__ == "__main__":
    main()
