import json

from cli.report import main

CSV = (
    "symbol,entry_time,position_type,net_pnl\n"
    "INFY,2025-12-23T09:20:00,LONG,120\n"
    "SBIN,2025-12-23T11:00:00,SHORT,-40\n"
    "HDFC,2025-12-24T10:00:00,SHORT,oops\n"
)


def test_missing_directory_exits_2(tmp_path, capsys):
    assert main(["--csv-dir", str(tmp_path / "missing")]) == 2
    assert "CSV directory not found" in capsys.readouterr().err


def test_json_report(tmp_path, capsys):
    (tmp_path / "trades_20251223.csv").write_text(CSV, encoding="utf-8")
    assert main(["--csv-dir", str(tmp_path), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)

    assert set(payload["stats"]) == {"ALL", "iTrack", "TrendFlo", "GBlast"}
    # the row with an unparseable pnl is kept at 0
    assert payload["stats"]["ALL"]["totalTrades"] == 3
    assert payload["stats"]["ALL"]["breakeven"] == 1
    assert payload["stats"]["ALL"]["totalPnL"] == 80
    assert payload["stats"]["iTrack"]["losers"] == 1
    assert payload["files"] == {"trades_20251223.csv": 3}
    assert payload["skipped"] == []


def test_text_report_single_partition(tmp_path, capsys):
    (tmp_path / "trades_20251223.csv").write_text(CSV, encoding="utf-8")
    assert main(["--csv-dir", str(tmp_path), "--strategy", "TrendFlo"]) == 0
    out = capsys.readouterr().out
    assert "== TrendFlo ==" in out
    assert "== ALL ==" not in out
    assert "Total PnL:   120.00" in out
