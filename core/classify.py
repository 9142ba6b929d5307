"""
Strategy classification.

Strategies are not named inside the logs; they are inferred from the
source filename and the position side. Rules, first match wins:

  1. filename contains a G-Blast marker    -> GBlast (side re-derived
     from direction, then signal_type)
  2. position type SHORT                   -> iTrack
  3. position type LONG                    -> TrendFlo
  4. anything else                         -> Unknown
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .columns import resolve
from .trade import PositionType, Strategy

GBLAST_MARKERS = ("live_trades", "gblast", "g-blast", "g_blast")

DIRECTION_SIDES: Dict[str, str] = {
    "BUY_CALL": PositionType.LONG.value,
    "BUY_PUT": PositionType.SHORT.value,
}

SIGNAL_SIDES: Dict[str, str] = {
    "BULLISH": PositionType.LONG.value,
    "BEARISH": PositionType.SHORT.value,
}


@dataclass(frozen=True)
class Classification:
    strategy: Strategy
    position_type: str


def is_gblast_file(filename: str) -> bool:
    name = os.path.basename(filename or "").lower()
    return any(marker in name for marker in GBLAST_MARKERS)


def gblast_side(row: Mapping[str, Any], fallback: str) -> str:
    direction = resolve(row, "direction").upper()
    if direction in DIRECTION_SIDES:
        return DIRECTION_SIDES[direction]
    signal = resolve(row, "signal_type").upper()
    if signal in SIGNAL_SIDES:
        return SIGNAL_SIDES[signal]
    return fallback


def classify_strategy(filename: str, row: Mapping[str, Any]) -> Classification:
    position_type = resolve(row, "position_type").upper()

    if is_gblast_file(filename):
        return Classification(Strategy.GBLAST, gblast_side(row, position_type))
    if position_type == PositionType.SHORT.value:
        return Classification(Strategy.ITRACK, position_type)
    if position_type == PositionType.LONG.value:
        return Classification(Strategy.TRENDFLO, position_type)
    return Classification(Strategy.UNKNOWN, position_type)


__all__ = ["Classification", "GBLAST_MARKERS", "classify_strategy", "gblast_side", "is_gblast_file"]
