from decimal import Decimal

from analytics.stats import STRATEGY_PARTITIONS, compute_stats, filter_date, filter_strategy, stats_by_strategy
from core.trade import Strategy, Trade


def _t(pnl, day=1, strategy=Strategy.TRENDFLO):
    side = "SHORT" if strategy is Strategy.ITRACK else "LONG"
    return Trade(symbol="X", position_type=side, date=f"2025-02-{day:02d}", net_pnl=pnl, strategy=strategy)


def test_aggregates():
    s = compute_stats([_t(10, 1), _t(-5, 2), _t(0, 3)])
    assert s.total_trades == 3
    assert s.total_pnl == Decimal("5")
    assert (s.winners, s.losers, s.breakeven) == (1, 1, 1)
    assert round(s.win_rate, 2) == Decimal("33.33")
    assert s.avg_profit == Decimal("10")
    assert s.avg_loss == Decimal("-5")
    assert round(s.avg_pnl_per_trade, 2) == Decimal("1.67")


def test_zero_trades_is_all_zero():
    s = compute_stats([])
    d = s.to_dict()
    for key in ("totalTrades", "totalPnL", "winners", "losers", "breakeven", "winRate", "avgProfit", "avgLoss"):
        assert d[key] == 0
    assert d["avgPnLPerTrade"] == 0
    assert d["maxDrawdown"] == 0
    assert d["timeUnderwater"] == 0
    assert d["drawdownHistory"] == []


def test_no_winners_or_no_losers():
    only_losses = compute_stats([_t(-1), _t(-3)])
    assert only_losses.avg_profit == 0
    assert only_losses.avg_loss == Decimal("-2")
    assert only_losses.win_rate == 0
    only_wins = compute_stats([_t(4)])
    assert only_wins.avg_loss == 0
    assert only_wins.win_rate == 100


def test_drawdown_is_composed():
    s = compute_stats([_t(100, 1), _t(-50, 2), _t(-30, 3), _t(200, 4)])
    assert s.drawdown.max_drawdown == Decimal("80")
    d = s.to_dict()
    assert d["maxDrawdown"] == 80.0
    assert d["timeUnderwater"] == 50.0
    assert d["drawdownPeriods"] == 1
    assert len(d["drawdownHistory"]) == 4


def test_idempotent():
    trades = [_t(3, 1), _t(-7, 2), _t(11, 3)]
    assert compute_stats(trades) == compute_stats(trades)
    assert compute_stats(trades).to_dict() == compute_stats(trades).to_dict()


def test_partitions():
    trades = [
        _t(10, 1, Strategy.TRENDFLO),
        _t(-4, 2, Strategy.ITRACK),
        _t(7, 3, Strategy.GBLAST),
        _t(1, 4, Strategy.UNKNOWN),
    ]
    stats = stats_by_strategy(trades)
    assert tuple(stats) == STRATEGY_PARTITIONS
    assert stats["ALL"].total_trades == 4
    assert stats["iTrack"].total_trades == 1
    assert stats["iTrack"].total_pnl == Decimal("-4")
    assert stats["TrendFlo"].total_pnl == Decimal("10")
    assert stats["GBlast"].total_pnl == Decimal("7")
    assert filter_strategy(trades, "Nope") == []


def test_filter_date():
    trades = [_t(1, 1), _t(2, 2), _t(3, 2)]
    assert [t.net_pnl for t in filter_date(trades, "2025-02-02")] == [2, 3]
