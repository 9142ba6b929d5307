from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------
# Normalized trade record
# ---------------------------------------------------------
class TradeRecord(BaseModel):
    symbol: str = Field(..., description="Instrument identifier")
    entry_time: str = Field("", description="Raw entry timestamp text")
    exit_time: str = Field("", description="Raw exit timestamp text")
    date: Optional[str] = Field(None, description="Trading date YYYY-MM-DD")
    entry_price: float = Field(0.0, description="Entry fill price")
    exit_price: float = Field(0.0, description="Exit fill price")
    position_type: str = Field(..., description="LONG, SHORT, OPTIONS or raw value")
    net_pnl: float = Field(0.0, description="Signed realized PnL")
    profit_pct: float = Field(0.0, description="Signed percentage return")
    exit_reason: str = Field("", description="Free-form exit reason code")
    quantity: float = Field(0.0, description="Quantity or lots")
    strategy: str = Field(..., description="iTrack, TrendFlo, GBlast or Unknown")
    source_file: str = Field(..., description="Basename of the originating CSV")


# ---------------------------------------------------------
# Equity curve / drawdown blocks
# ---------------------------------------------------------
class EquityPointModel(BaseModel):
    date: Optional[str] = Field(None, description="Trade date")
    equity: float = Field(..., description="Cumulative PnL after this trade")
    peak: float = Field(..., description="Highest cumulative PnL so far")
    drawdown: float = Field(..., description="equity - peak (<= 0)")
    drawdownPercent: float = Field(..., description="drawdown / peak * 100 (<= 0)")


class DrawdownPeriodModel(BaseModel):
    start: Optional[str] = Field(None, description="Date the period started")
    end: Optional[str] = Field(None, description="Date the period ended (or last trade)")
    duration: int = Field(..., description="Trades spent underwater")
    maxDD: float = Field(..., description="Running max drawdown when the period closed")


class DrawdownSummary(BaseModel):
    maxDrawdown: float
    maxDrawdownPercent: float
    drawdownPeriods: int
    timeUnderwater: float = Field(..., description="Percent of trades underwater")


class DrawdownDetail(DrawdownSummary):
    avgDrawdownDuration: float = Field(..., description="Mean period duration in trades")
    maxDrawdownDuration: int = Field(..., description="Longest period in trades")
    currentDrawdown: float = Field(..., description="Drawdown after the last trade (signed)")
    drawdownHistory: List[EquityPointModel] = Field(..., description="Equity curve, ascending")
    periods: List[DrawdownPeriodModel] = Field(default_factory=list, description="Closed drawdown periods")


# ---------------------------------------------------------
# Aggregate stats for one partition
# ---------------------------------------------------------
class TradeStatsModel(DrawdownDetail):
    totalTrades: int
    totalPnL: float
    winners: int
    losers: int
    breakeven: int
    winRate: float = Field(..., description="Winners as percent of all trades")
    avgProfit: float
    avgLoss: float
    avgPnLPerTrade: float


class SkippedFileModel(BaseModel):
    filename: str
    reason: str


class DailyPnLModel(BaseModel):
    date: str
    pnl: float
    trades: int
    winners: int
    losers: int
    cumulative: float


# ---------------------------------------------------------
# Responses
# ---------------------------------------------------------
class TradesResponse(BaseModel):
    success: bool = True
    trades: List[TradeRecord]
    stats: Dict[str, TradeStatsModel] = Field(..., description="ALL plus one entry per strategy")
    skipped: List[SkippedFileModel] = Field(default_factory=list)
    timestamp: str


class PartitionResponse(BaseModel):
    success: bool = True
    strategy: Optional[str] = None
    date: Optional[str] = None
    trades: List[TradeRecord]
    stats: TradeStatsModel
    timestamp: str


class DrawdownMetricsBlock(BaseModel):
    ALL: DrawdownDetail = Field(..., description="Full drawdown detail across all strategies")
    iTrack: DrawdownSummary
    TrendFlo: DrawdownSummary
    GBlast: DrawdownSummary


class DrawdownResponse(BaseModel):
    success: bool = True
    drawdownMetrics: DrawdownMetricsBlock
    timestamp: str


class DailyResponse(BaseModel):
    success: bool = True
    strategy: str
    daily: List[DailyPnLModel]
    dates: List[str] = Field(..., description="Distinct trade dates, newest first")
    timestamp: str


class HealthResponse(BaseModel):
    success: bool = True
    message: str
    source: str
    timestamp: str
