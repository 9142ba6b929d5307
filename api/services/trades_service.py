from __future__ import annotations

import datetime
from typing import List

from analytics.daily import daily_pnl, unique_dates
from analytics.stats import ALL, compute_stats, filter_date, filter_strategy, stats_by_strategy
from api.models.trades import (
    DailyPnLModel,
    DailyResponse,
    DrawdownDetail,
    DrawdownMetricsBlock,
    DrawdownResponse,
    DrawdownSummary,
    PartitionResponse,
    SkippedFileModel,
    TradeRecord,
    TradeStatsModel,
    TradesResponse,
)
from core.loader import LoadResult, load_batches
from core.trade import Trade
from sources import TradeSource


def _now() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat()


def _records(trades: List[Trade]) -> List[TradeRecord]:
    return [TradeRecord(**t.to_dict()) for t in trades]


# ---------------------------------------------------------
# Builder service for the trades API
# ---------------------------------------------------------
class TradesService:
    """
    Reads the source, runs the loader and shapes the analytics output
    into response models. No caching: each call re-reads every file.
    """

    def __init__(self, source: TradeSource):
        self.source = source

    def load(self) -> LoadResult:
        return load_batches(self.source.read_batches())

    # -----------------------------------------------------
    # /api/trades
    # -----------------------------------------------------
    def all_trades(self) -> TradesResponse:
        result = self.load()
        stats = stats_by_strategy(result.trades)
        return TradesResponse(
            trades=_records(result.trades),
            stats={name: TradeStatsModel(**s.to_dict()) for name, s in stats.items()},
            skipped=[SkippedFileModel(filename=s.filename, reason=s.reason) for s in result.skipped],
            timestamp=_now(),
        )

    # -----------------------------------------------------
    # /api/trades/by-strategy/{strategy}
    # -----------------------------------------------------
    def by_strategy(self, strategy: str) -> PartitionResponse:
        trades = filter_strategy(self.load().trades, strategy)
        return PartitionResponse(
            strategy=strategy,
            trades=_records(trades),
            stats=TradeStatsModel(**compute_stats(trades).to_dict()),
            timestamp=_now(),
        )

    # -----------------------------------------------------
    # /api/trades/by-date/{date}
    # -----------------------------------------------------
    def by_date(self, date: str) -> PartitionResponse:
        trades = filter_date(self.load().trades, date)
        return PartitionResponse(
            date=date,
            trades=_records(trades),
            stats=TradeStatsModel(**compute_stats(trades).to_dict()),
            timestamp=_now(),
        )

    # -----------------------------------------------------
    # /api/drawdown
    # -----------------------------------------------------
    def drawdown(self) -> DrawdownResponse:
        stats = stats_by_strategy(self.load().trades)
        blocks = {name: s.drawdown.to_dict() for name, s in stats.items()}
        return DrawdownResponse(
            drawdownMetrics=DrawdownMetricsBlock(
                ALL=DrawdownDetail(**blocks[ALL]),
                iTrack=DrawdownSummary(**blocks["iTrack"]),
                TrendFlo=DrawdownSummary(**blocks["TrendFlo"]),
                GBlast=DrawdownSummary(**blocks["GBlast"]),
            ),
            timestamp=_now(),
        )

    # -----------------------------------------------------
    # /api/daily
    # -----------------------------------------------------
    def daily(self, strategy: str = ALL) -> DailyResponse:
        all_trades = self.load().trades
        trades = filter_strategy(all_trades, strategy)
        return DailyResponse(
            strategy=strategy,
            daily=[DailyPnLModel(**d.to_dict()) for d in daily_pnl(trades)],
            dates=unique_dates(all_trades),
            timestamp=_now(),
        )
