"""Performance analytics over normalized trades.

Pure stdlib + Decimal. Nothing here reads files or keeps state between calls.
"""

from .drawdown import DrawdownMetrics, DrawdownPeriod, EquityPoint, compute_drawdown
from .stats import STRATEGY_PARTITIONS, TradeStats, compute_stats, stats_by_strategy
from .daily import DailyPnL, daily_pnl, unique_dates

__all__ = [
    "DrawdownMetrics",
    "DrawdownPeriod",
    "EquityPoint",
    "compute_drawdown",
    "STRATEGY_PARTITIONS",
    "TradeStats",
    "compute_stats",
    "stats_by_strategy",
    "DailyPnL",
    "daily_pnl",
    "unique_dates",
]
