"""Numeric and date parsing helpers used by the row normalizer."""

from __future__ import annotations

import os
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .errors import ParseError

_ISO_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_COMPACT_DATE_RE = re.compile(r"(\d{8})")


def parse_decimal(value: Any, field: str = "value") -> Decimal:
    """
    Missing or empty text is 0. Anything else must be a finite number,
    otherwise ParseError is raised.
    """
    if value is None:
        return Decimal("0")
    text = str(value).strip()
    if text == "":
        return Decimal("0")
    try:
        d = Decimal(text)
    except InvalidOperation:
        raise ParseError(field, str(value)) from None
    if not d.is_finite():
        raise ParseError(field, str(value))
    return d


def date_from_filename(filename: str) -> Optional[str]:
    """
    live_trades_2025-12-31.csv -> 2025-12-31
    live_trades_20251231_152554.csv -> 2025-12-31
    """
    name = os.path.basename(filename or "")
    m = _ISO_DATE_RE.search(name)
    if m:
        return f"{m.group(1)}-{m.group(2)}-{m.group(3)}"
    m = _COMPACT_DATE_RE.search(name)
    if m:
        s = m.group(1)
        return f"{s[0:4]}-{s[4:6]}-{s[6:8]}"
    return None


def extract_date(entry_time: str, exit_time: str, filename: str) -> Optional[str]:
    """
    Trading date from the entry timestamp, or the exit timestamp when no
    entry timestamp exists. Time-only values ("09:52") take the date from
    the filename.
    """
    stamp = entry_time or exit_time
    if not stamp:
        return None
    if "T" in stamp:
        return stamp.split("T", 1)[0]
    if " " in stamp:
        return stamp.split(" ", 1)[0]
    if ":" in stamp and len(stamp) <= 5:
        return date_from_filename(filename)
    return None


__all__ = ["parse_decimal", "date_from_filename", "extract_date"]
