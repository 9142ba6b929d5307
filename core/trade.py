"""
Canonical trade record shared by the loader and the analytics engines.

Every source CSV, whatever its header spelling, is reduced to this shape.
Instances are immutable once built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Strategy(str, Enum):
    ITRACK = "iTrack"
    TRENDFLO = "TrendFlo"
    GBLAST = "GBlast"
    UNKNOWN = "Unknown"


class PositionType(str, Enum):
    LONG = "LONG"
    SHORT = "SHORT"
    OPTIONS = "OPTIONS"


def to_decimal(v: Any) -> Decimal:
    """Coerce int/float/str/Decimal into Decimal; None becomes 0."""
    if v is None:
        return Decimal("0")
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


@dataclass(frozen=True)
class Trade:
    symbol: str
    position_type: str
    date: Optional[str]
    entry_time: str = ""
    exit_time: str = ""
    entry_price: Decimal = Decimal("0")
    exit_price: Decimal = Decimal("0")
    net_pnl: Decimal = Decimal("0")
    profit_pct: Decimal = Decimal("0")
    exit_reason: str = ""
    quantity: Decimal = Decimal("0")
    strategy: Strategy = Strategy.UNKNOWN
    source_file: str = ""
    # names of numeric fields whose non-empty text failed to parse
    parse_errors: Tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        for name in ("entry_price", "exit_price", "net_pnl", "profit_pct", "quantity"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))
        if not isinstance(self.strategy, Strategy):
            object.__setattr__(self, "strategy", Strategy(self.strategy))

    @property
    def is_valid(self) -> bool:
        return bool(self.symbol) and bool(self.position_type) and bool(self.date)

    @property
    def timestamp(self) -> datetime:
        return trade_timestamp(self.date, self.entry_time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "entry_time": self.entry_time,
            "exit_time": self.exit_time,
            "date": self.date,
            "entry_price": float(self.entry_price),
            "exit_price": float(self.exit_price),
            "position_type": self.position_type,
            "net_pnl": float(self.net_pnl),
            "profit_pct": float(self.profit_pct),
            "exit_reason": self.exit_reason,
            "quantity": float(self.quantity),
            "strategy": self.strategy.value,
            "source_file": self.source_file,
        }


# ---------- chronological ordering ----------

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,6}))?)?")
_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y")


def _time_of_day(entry_time: str) -> Tuple[int, int, int, int]:
    text = entry_time or "00:00:00"
    if "T" in text:
        text = text.split("T", 1)[1]
    elif " " in text.strip():
        text = text.strip().split(" ", 1)[1]
    m = _TIME_RE.match(text.strip())
    if not m:
        return 0, 0, 0, 0
    hh, mm, ss, frac = m.groups()
    micros = int((frac or "0").ljust(6, "0"))
    return int(hh), int(mm), int(ss or 0), micros


def trade_timestamp(date: Optional[str], entry_time: str = "") -> datetime:
    """
    Timestamp used to order trades: the trade date combined with the
    time of day found in entry_time ("00:00:00" when absent).
    Unparseable dates sort as datetime.min.
    """
    day = None
    for fmt in _DATE_FORMATS:
        try:
            day = datetime.strptime((date or "").strip(), fmt)
            break
        except ValueError:
            continue
    if day is None:
        return datetime.min
    hh, mm, ss, micros = _time_of_day(entry_time)
    try:
        return day.replace(hour=hh, minute=mm, second=ss, microsecond=micros)
    except ValueError:
        return day


def chrono_key(trade: Trade) -> datetime:
    return trade.timestamp


__all__ = ["Strategy", "PositionType", "Trade", "to_decimal", "trade_timestamp", "chrono_key"]
