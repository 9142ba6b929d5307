"""
Drawdown engine over a trade sequence.

Builds the cumulative P&L equity curve (starting from 0), tracks the running
peak and derives drawdown periods and time-underwater. Durations are counted
in trades, not calendar days.

Pure stdlib + Decimal; no pandas dependency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

from core.trade import Trade, chrono_key

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class EquityPoint:
    date: Optional[str]
    equity: Decimal
    peak: Decimal
    drawdown: Decimal  # <= 0
    drawdown_percent: Decimal  # <= 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "equity": float(self.equity),
            "peak": float(self.peak),
            "drawdown": float(self.drawdown),
            "drawdownPercent": float(self.drawdown_percent),
        }


@dataclass(frozen=True)
class DrawdownPeriod:
    start: Optional[str]
    end: Optional[str]
    duration: int  # trades spent underwater
    # all-time running minimum at close time, not the minimum inside the period
    max_dd: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "end": self.end, "duration": self.duration, "maxDD": float(self.max_dd)}


@dataclass(frozen=True)
class DrawdownMetrics:
    max_drawdown: Decimal = ZERO
    max_drawdown_percent: Decimal = ZERO
    drawdown_periods: int = 0
    avg_drawdown_duration: Decimal = ZERO
    max_drawdown_duration: int = 0
    time_underwater: Decimal = ZERO
    current_drawdown: Decimal = ZERO
    drawdown_history: Tuple[EquityPoint, ...] = ()
    periods: Tuple[DrawdownPeriod, ...] = field(default=())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "maxDrawdown": float(self.max_drawdown),
            "maxDrawdownPercent": float(self.max_drawdown_percent),
            "drawdownPeriods": self.drawdown_periods,
            "avgDrawdownDuration": float(self.avg_drawdown_duration),
            "maxDrawdownDuration": self.max_drawdown_duration,
            "timeUnderwater": float(self.time_underwater),
            "currentDrawdown": float(self.current_drawdown),
            "drawdownHistory": [p.to_dict() for p in self.drawdown_history],
            "periods": [p.to_dict() for p in self.periods],
        }


def compute_drawdown(trades: Sequence[Trade]) -> DrawdownMetrics:
    """
    Single forward pass over the trades in ascending (date, entry time)
    order. Input order is irrelevant except for ties, which keep it.
    """
    if not trades:
        return DrawdownMetrics()

    ordered = sorted(trades, key=chrono_key)

    cumulative = ZERO
    peak = ZERO
    max_dd = ZERO
    max_dd_pct = ZERO
    current = ZERO
    in_drawdown = False
    dd_start: Optional[str] = None
    dd_trades = 0
    underwater = 0

    periods: List[DrawdownPeriod] = []
    curve: List[EquityPoint] = []

    for t in ordered:
        cumulative += t.net_pnl

        if cumulative > peak:
            peak = cumulative
            if in_drawdown:
                periods.append(DrawdownPeriod(dd_start, t.date, dd_trades, max_dd))
                in_drawdown = False
                dd_trades = 0

        dd = cumulative - peak
        dd_pct = dd / peak * HUNDRED if peak != 0 else ZERO

        if dd < 0:
            if not in_drawdown:
                in_drawdown = True
                dd_start = t.date
                dd_trades = 1
            else:
                dd_trades += 1
            underwater += 1

        if dd < max_dd:
            max_dd = dd
        if dd_pct < max_dd_pct:
            max_dd_pct = dd_pct

        current = dd
        curve.append(EquityPoint(t.date, cumulative, peak, dd, dd_pct))

    if in_drawdown:
        periods.append(DrawdownPeriod(dd_start, ordered[-1].date, dd_trades, max_dd))

    durations = [p.duration for p in periods]
    avg_duration = Decimal(sum(durations)) / Decimal(len(durations)) if durations else ZERO

    return DrawdownMetrics(
        max_drawdown=abs(max_dd),
        max_drawdown_percent=abs(max_dd_pct),
        drawdown_periods=len(periods),
        avg_drawdown_duration=avg_duration,
        max_drawdown_duration=max(durations) if durations else 0,
        time_underwater=Decimal(underwater) / Decimal(len(ordered)) * HUNDRED,
        current_drawdown=current,
        drawdown_history=tuple(curve),
        periods=tuple(periods),
    )


__all__ = ["EquityPoint", "DrawdownPeriod", "DrawdownMetrics", "compute_drawdown"]
