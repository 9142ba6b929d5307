"""
Header aliases for trade-log CSVs.

Single source of truth for every column spelling accepted by the normalizer.
Order inside each tuple is significant: the first non-empty match wins.
Matching is exact; no fuzzy or case-insensitive lookups.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple


def case_variants(name: str) -> Tuple[str, ...]:
    """entry_price -> (entry_price, Entry_Price, ENTRY_PRICE)."""
    title = "_".join(part.capitalize() for part in name.split("_"))
    return (name, title, name.upper())


FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "symbol": case_variants("symbol"),
    "entry_time": case_variants("entry_time"),
    "exit_time": case_variants("exit_time"),
    "entry_price": case_variants("entry_price"),
    "exit_price": case_variants("exit_price"),
    "position_type": case_variants("position_type"),
    "exit_reason": case_variants("exit_reason"),
    "quantity": ("quantity", "quantity_lots", "Quantity", "QUANTITY"),
    # option-strategy logs describe the side instead of a position type
    "direction": case_variants("direction"),
    "signal_type": case_variants("signal_type"),
    "entry_strike": case_variants("entry_strike"),
    "option_type": case_variants("option_type"),
    # option logs report total_pnl / pnl_pct
    "net_pnl": ("total_pnl", "net_pnl", "pnl", "Net_PnL", "PNL", "Total_PnL"),
    "profit_pct": ("pnl_pct", "profit_pct", "return_pct", "Profit_Pct", "PROFIT_PCT"),
}


def resolve(row: Mapping[str, Any], field: str) -> str:
    """Return the first non-empty value among the aliases of `field`, else ""."""
    for key in FIELD_ALIASES[field]:
        value = row.get(key)
        if value is None:
            continue
        text = value if isinstance(value, str) else str(value)
        if text != "":
            return text
    return ""


__all__ = ["FIELD_ALIASES", "case_variants", "resolve"]
