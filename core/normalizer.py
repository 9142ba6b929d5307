"""
Row normalizer: one raw CSV row + its filename -> one canonical Trade.

Never raises. A malformed row still yields a Trade; the loader decides
whether it is kept. Unparseable numbers become 0 and are listed in
`Trade.parse_errors`.
"""

from __future__ import annotations

import os
from decimal import Decimal
from typing import Any, List, Mapping

from utils.logger import get_logger, log_extra

from .classify import classify_strategy
from .columns import resolve
from .errors import ParseError
from .parsing import extract_date, parse_decimal
from .trade import Strategy, Trade

log = get_logger("tradelog.normalizer")

NUMERIC_FIELDS = ("entry_price", "exit_price", "net_pnl", "profit_pct", "quantity")


def gblast_symbol(row: Mapping[str, Any]) -> str:
    strike = resolve(row, "entry_strike")
    option_type = resolve(row, "option_type")
    if strike and option_type:
        return f"NIFTY {strike} {option_type}"
    return "NIFTY"


def normalize_row(row: Mapping[str, Any], filename: str) -> Trade:
    source_file = os.path.basename(filename or "")
    entry_time = resolve(row, "entry_time")
    exit_time = resolve(row, "exit_time")

    cls = classify_strategy(source_file, row)

    symbol = resolve(row, "symbol")
    if not symbol and cls.strategy is Strategy.GBLAST:
        symbol = gblast_symbol(row)

    numbers = {}
    errors: List[str] = []
    for name in NUMERIC_FIELDS:
        try:
            numbers[name] = parse_decimal(resolve(row, name), name)
        except ParseError as e:
            log.warning("unparseable numeric field", **log_extra(file=source_file, field=e.field, value=e.value))
            # unparseable counts as 0, the field is recorded in parse_errors
            numbers[name] = Decimal("0")
            errors.append(name)

    return Trade(
        symbol=symbol,
        position_type=cls.position_type,
        date=extract_date(entry_time, exit_time, source_file),
        entry_time=entry_time,
        exit_time=exit_time,
        exit_reason=resolve(row, "exit_reason"),
        strategy=cls.strategy,
        source_file=source_file,
        parse_errors=tuple(errors),
        **numbers,
    )


__all__ = ["normalize_row", "gblast_symbol", "NUMERIC_FIELDS"]
