from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from analytics.stats import ALL
from api.deps.source import get_trade_source
from api.models.trades import DailyResponse, DrawdownResponse, PartitionResponse, TradesResponse
from api.services.trades_service import TradesService
from sources import TradeSource

router = APIRouter(prefix="/api", tags=["trades"])


def get_service(source: TradeSource = Depends(get_trade_source)) -> TradesService:
    return TradesService(source)


# ---------------------------------------------------------
# GET /api/trades
# ---------------------------------------------------------
@router.get(
    "/trades",
    response_model=TradesResponse,
    summary="All trades with per-strategy stats",
)
def get_trades(service: TradesService = Depends(get_service)) -> TradesResponse:
    return service.all_trades()


# ---------------------------------------------------------
# GET /api/trades/by-strategy/{strategy}
# ---------------------------------------------------------
@router.get(
    "/trades/by-strategy/{strategy}",
    response_model=PartitionResponse,
    response_model_exclude_none=True,
    summary="Trades and stats for one strategy (or ALL)",
)
def get_trades_by_strategy(strategy: str, service: TradesService = Depends(get_service)) -> PartitionResponse:
    return service.by_strategy(strategy)


# ---------------------------------------------------------
# GET /api/trades/by-date/{date}
# ---------------------------------------------------------
@router.get(
    "/trades/by-date/{date}",
    response_model=PartitionResponse,
    response_model_exclude_none=True,
    summary="Trades and stats for one trading date",
)
def get_trades_by_date(date: str, service: TradesService = Depends(get_service)) -> PartitionResponse:
    return service.by_date(date)


# ---------------------------------------------------------
# GET /api/drawdown
# ---------------------------------------------------------
@router.get(
    "/drawdown",
    response_model=DrawdownResponse,
    summary="Drawdown analysis: full detail for ALL, summary per strategy",
)
def get_drawdown(service: TradesService = Depends(get_service)) -> DrawdownResponse:
    return service.drawdown()


# ---------------------------------------------------------
# GET /api/daily
# ---------------------------------------------------------
@router.get(
    "/daily",
    response_model=DailyResponse,
    summary="Daily PnL with running cumulative total",
)
def get_daily(
    strategy: str = Query(ALL, description="Strategy partition"),
    service: TradesService = Depends(get_service),
) -> DailyResponse:
    return service.daily(strategy)
