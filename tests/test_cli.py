import pandas as pd
import pytest

from portfolio_projector.cli import main, parse_asset


def test_default_run(capsys):
    assert main(["--duration", "3"]) == 0
    out = capsys.readouterr().out
    assert "Risk score: 5.6 / 10" in out
    assert "Baseline value" in out


def test_custom_assets_and_csv(tmp_path, capsys):
    path = tmp_path / "projection.csv"
    code = main([
        "--initial", "5000", "--annual", "0", "--duration", "4", "--rebalance", "2",
        "--asset", "stocks:Stocks:8:70:7",
        "--asset", "bonds:Bonds:3:30:3",
        "--no-comparison",
        "--csv", str(path),
    ])
    assert code == 0
    assert "Baseline value" not in capsys.readouterr().out

    df = pd.read_csv(path)
    assert len(df) == 4 * 2
    assert set(df["asset_id"]) == {"stocks", "bonds"}


def test_bad_allocation_exits_with_status_2():
    assert main(["--asset", "a:A:5:50:5", "--asset", "b:B:5:40:5"]) == 2


def test_parse_asset():
    a = parse_asset("gold:Gold:2.5:10:6")
    assert (a.id, a.name, a.expected_return, a.allocation, a.risk) == ("gold", "Gold", 2.5, 10.0, 6.0)


@pytest.mark.parametrize("text", ["gold:Gold:2", "gold:Gold:x:10:6"])
def test_parse_asset_rejects_malformed(text):
    with pytest.raises(SystemExit):
        main(["--asset", text])


def test_growth_rates_without_initial_balance(capsys):
    assert main(["--initial", "0", "--duration", "3"]) == 0
    out = capsys.readouterr().out
    assert "CAGR: n/a" in out
    assert "nan" not in out.lower()
