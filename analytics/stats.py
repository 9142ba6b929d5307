"""
Win/loss statistics for a trade list, with the drawdown block folded in.

Every call recomputes from its input; partitions are independent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from core.trade import Strategy, Trade

from .drawdown import DrawdownMetrics, compute_drawdown

ZERO = Decimal("0")
ALL = "ALL"

STRATEGY_PARTITIONS = (ALL, Strategy.ITRACK.value, Strategy.TRENDFLO.value, Strategy.GBLAST.value)


@dataclass(frozen=True)
class TradeStats:
    total_trades: int = 0
    total_pnl: Decimal = ZERO
    winners: int = 0
    losers: int = 0
    breakeven: int = 0
    win_rate: Decimal = ZERO  # percent
    avg_profit: Decimal = ZERO
    avg_loss: Decimal = ZERO  # <= 0
    avg_pnl_per_trade: Decimal = ZERO
    drawdown: DrawdownMetrics = field(default_factory=DrawdownMetrics)

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "totalTrades": self.total_trades,
            "totalPnL": float(self.total_pnl),
            "winners": self.winners,
            "losers": self.losers,
            "breakeven": self.breakeven,
            "winRate": float(self.win_rate),
            "avgProfit": float(self.avg_profit),
            "avgLoss": float(self.avg_loss),
            "avgPnLPerTrade": float(self.avg_pnl_per_trade),
        }
        out.update(self.drawdown.to_dict())
        return out


def mean(xs: List[Decimal]) -> Decimal:
    return sum(xs, ZERO) / Decimal(len(xs)) if xs else ZERO


def compute_stats(trades: Sequence[Trade]) -> TradeStats:
    total = len(trades)
    if total == 0:
        return TradeStats(drawdown=compute_drawdown(trades))

    pnls = [t.net_pnl for t in trades]
    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]
    flat = [p for p in pnls if p == 0]
    total_pnl = sum(pnls, ZERO)

    return TradeStats(
        total_trades=total,
        total_pnl=total_pnl,
        winners=len(wins),
        losers=len(losses),
        breakeven=len(flat),
        win_rate=Decimal(len(wins)) / Decimal(total) * Decimal("100"),
        avg_profit=mean(wins),
        avg_loss=mean(losses),
        avg_pnl_per_trade=total_pnl / Decimal(total),
        drawdown=compute_drawdown(trades),
    )


def filter_strategy(trades: Sequence[Trade], strategy: str) -> List[Trade]:
    if strategy == ALL:
        return list(trades)
    return [t for t in trades if t.strategy.value == strategy]


def filter_date(trades: Sequence[Trade], date: str) -> List[Trade]:
    return [t for t in trades if t.date == date]


def stats_by_strategy(trades: Sequence[Trade]) -> Dict[str, TradeStats]:
    return {name: compute_stats(filter_strategy(trades, name)) for name in STRATEGY_PARTITIONS}


__all__ = [
    "ALL",
    "STRATEGY_PARTITIONS",
    "TradeStats",
    "compute_stats",
    "filter_strategy",
    "filter_date",
    "stats_by_strategy",
]
