import argparse
import json
import sys

from analytics.stats import STRATEGY_PARTITIONS, compute_stats, filter_strategy
from core.errors import SourceError
from core.loader import load_batches
from sources.local import LocalCsvSource


def format_stats(name, s) -> str:
    dd = s.drawdown
    return "\n".join(
        [
            f"== {name} ==",
            f"Trades:      {s.total_trades}  (W {s.winners} / L {s.losers} / BE {s.breakeven})",
            f"Total PnL:   {s.total_pnl:.2f}",
            f"WinRate:     {s.win_rate:.2f}%",
            f"Avg win:     {s.avg_profit:.2f}",
            f"Avg loss:    {s.avg_loss:.2f}",
            f"PnL/trade:   {s.avg_pnl_per_trade:.2f}",
            f"MaxDD:       {dd.max_drawdown:.2f} ({dd.max_drawdown_percent:.2f}%)",
            f"DD periods:  {dd.drawdown_periods}  avg {dd.avg_drawdown_duration:.1f} / max {dd.max_drawdown_duration} trades",
            f"Underwater:  {dd.time_underwater:.2f}%",
        ]
    )


def main(argv=None):
    p = argparse.ArgumentParser(prog="tradelog-report", description="Summarize trade-log CSVs")
    p.add_argument("--csv-dir", default="trades", help="Directory of trade-log CSV files")
    p.add_argument(
        "--strategy",
        default=None,
        choices=list(STRATEGY_PARTITIONS),
        help="Only report this partition (default: all partitions)",
    )
    p.add_argument("--json", action="store_true", help="Print stats as JSON")
    args = p.parse_args(argv)

    try:
        batches = LocalCsvSource(args.csv_dir).read_batches()
    except SourceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = load_batches(batches)
    names = [args.strategy] if args.strategy else list(STRATEGY_PARTITIONS)
    stats = {name: compute_stats(filter_strategy(result.trades, name)) for name in names}

    if args.json:
        payload = {
            "stats": {name: s.to_dict() for name, s in stats.items()},
            "files": result.loaded_per_file(),
            "skipped": [{"filename": s.filename, "reason": s.reason} for s in result.skipped],
        }
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Files: {len(result.files)} loaded, {len(result.skipped)} skipped; trades: {result.total}")
    for name in names:
        print()
        print(format_stats(name, stats[name]))
    if result.skipped:
        print()
        for s in result.skipped:
            print(f"skipped {s.filename}: {s.reason}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
