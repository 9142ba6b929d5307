from decimal import Decimal

from analytics.daily import daily_pnl, unique_dates
from core.trade import Trade


def _t(date, pnl):
    return Trade(symbol="X", position_type="LONG", date=date, net_pnl=pnl)


def test_daily_groups_and_accumulates():
    trades = [_t("2025-03-02", 5), _t("2025-03-01", 10), _t("2025-03-02", -8), _t("2025-03-03", 0)]
    rows = daily_pnl(trades)
    assert [r.date for r in rows] == ["2025-03-01", "2025-03-02", "2025-03-03"]
    assert [r.pnl for r in rows] == [Decimal("10"), Decimal("-3"), Decimal("0")]
    assert [r.cumulative for r in rows] == [Decimal("10"), Decimal("7"), Decimal("7")]
    assert (rows[1].trades, rows[1].winners, rows[1].losers) == (2, 1, 1)
    assert rows[2].to_dict() == {
        "date": "2025-03-03",
        "pnl": 0.0,
        "trades": 1,
        "winners": 0,
        "losers": 0,
        "cumulative": 7.0,
    }


def test_unique_dates_newest_first():
    trades = [_t("2025-03-01", 1), _t("2025-03-03", 1), _t("2025-03-01", 1), _t(None, 1)]
    assert unique_dates(trades) == ["2025-03-03", "2025-03-01"]


def test_empty():
    assert daily_pnl([]) == []
    assert unique_dates([]) == []
