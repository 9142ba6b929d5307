from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from core.trade import Trade


@dataclass(frozen=True)
class DailyPnL:
    date: str
    pnl: Decimal
    trades: int
    winners: int
    losers: int
    cumulative: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "pnl": float(self.pnl),
            "trades": self.trades,
            "winners": self.winners,
            "losers": self.losers,
            "cumulative": float(self.cumulative),
        }


def daily_pnl(trades: Sequence[Trade]) -> List[DailyPnL]:
    """Per-date P&L, ascending by date, with a running cumulative total."""
    grouped: Dict[str, List[Trade]] = {}
    for t in trades:
        if t.date:
            grouped.setdefault(t.date, []).append(t)

    out: List[DailyPnL] = []
    cumulative = Decimal("0")
    for day in sorted(grouped):
        rows = grouped[day]
        pnl = sum((t.net_pnl for t in rows), Decimal("0"))
        cumulative += pnl
        out.append(
            DailyPnL(
                date=day,
                pnl=pnl,
                trades=len(rows),
                winners=sum(1 for t in rows if t.net_pnl > 0),
                losers=sum(1 for t in rows if t.net_pnl < 0),
                cumulative=cumulative,
            )
        )
    return out


def unique_dates(trades: Sequence[Trade]) -> List[str]:
    """Distinct trade dates, newest first."""
    return sorted({t.date for t in trades if t.date}, reverse=True)
