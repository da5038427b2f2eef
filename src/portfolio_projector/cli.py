"""
Command line entry point for the portfolio projection calculator.

Usage:
    portfolio-projector                               # default 60/30/10 portfolio
    portfolio-projector --duration 20 --rebalance 2
    portfolio-projector --asset stocks:Stocks:8:70:7 --asset bonds:Bonds:3:30:3
    portfolio-projector --csv projection.csv          # per-asset rows to CSV
"""
import argparse
import logging
import sys

import numpy as np

from .analytics.metrics import cagr, mwrr_irr
from .analytics.tables import results_to_frame, summary_frame
from .config import DEFAULT_ASSET_CLASSES, DEFAULTS, AssetClass, PortfolioAllocation
from .engine.projector import PortfolioProjector
from .engine.risk import round_risk
from .errors import ValidationError

logger = logging.getLogger(__name__)


def parse_asset(text: str) -> AssetClass:
    """Parse ``id:name:expected_return:allocation:risk``."""
    parts = text.split(":")
    if len(parts) != 5:
        raise argparse.ArgumentTypeError(
            f"expected id:name:return:allocation:risk, got {text!r}"
        )
    asset_id, name, ret, alloc, risk = parts
    try:
        return AssetClass(asset_id, name, float(ret), float(alloc), float(risk))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"bad number in {text!r}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-projector",
        description="Project a diversified portfolio year by year and compare it to a single-rate investment",
    )
    parser.add_argument("--initial", type=float, default=DEFAULTS["initial_investment"],
                        help="Initial investment")
    parser.add_argument("--annual", type=float, default=DEFAULTS["annual_investment"],
                        help="Contribution added at the start of every year")
    parser.add_argument("--duration", type=int, default=DEFAULTS["duration"],
                        help="Number of years to project")
    parser.add_argument("--rebalance", type=int, default=DEFAULTS["rebalancing_frequency"],
                        help="Rebalance every N years (0 = never)")
    parser.add_argument("--asset", dest="assets", type=parse_asset, action="append",
                        metavar="ID:NAME:RETURN:ALLOC:RISK",
                        help="Asset class; repeat for each one (default: stocks/bonds/real estate)")
    parser.add_argument("--no-comparison", action="store_true",
                        help="Skip the single-rate baseline")
    parser.add_argument("--csv", default=None, help="Write per-asset yearly rows to this CSV file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - [%(levelname)s] - %(message)s",
    )

    allocation = PortfolioAllocation(
        initial_investment=args.initial,
        annual_investment=args.annual,
        duration=args.duration,
        assets=args.assets or DEFAULT_ASSET_CLASSES,
        rebalancing_frequency=args.rebalance,
    )
    try:
        out = PortfolioProjector(allocation, include_comparison=not args.no_comparison).run()
    except ValidationError as e:
        logger.error("Invalid portfolio: %s", e)
        return 2

    results = out["results"]
    final = results[-1]
    print(summary_frame(results, out["comparison"]).to_string(float_format=lambda x: f"{x:,.2f}"))
    print()
    print(f"Risk score: {round_risk(out['risk'])} / 10")
    print(f"Final value: ${final.total_value:,.2f} (invested ${final.total_amount_invested:,.2f})")
    for label, rate in (("CAGR", cagr(out["balances"], allocation.duration)),
                        ("Money-weighted return", mwrr_irr(out["cashflows"], out["balances"]))):
        print(f"{label}: " + ("n/a" if np.isnan(rate) else f"{rate:.2%}"))
    if out["comparison"]:
        base = out["comparison"][-1]
        print(f"Baseline value: ${base.value_end_of_year:,.2f}")

    if args.csv:
        results_to_frame(results).to_csv(args.csv, index=False)
        logger.info("Saved: %s", args.csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
