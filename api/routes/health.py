import datetime

from fastapi import APIRouter, Depends

from api.deps.source import get_trade_source
from api.models.trades import HealthResponse
from sources import TradeSource

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_root(source: TradeSource = Depends(get_trade_source)) -> HealthResponse:
    return HealthResponse(
        message="Trading Dashboard API is running",
        source=source.describe(),
        timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
    )
