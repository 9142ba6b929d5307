"""Shared CSV reading for trade sources."""

from __future__ import annotations

from typing import Any, Dict, List, Protocol

import pandas as pd

from core.loader import RowBatch


class TradeSource(Protocol):
    def read_batches(self) -> List[RowBatch]: ...

    def describe(self) -> str: ...


def rows_from_csv(path_or_buffer: Any) -> List[Dict[str, str]]:
    """
    Read a CSV keeping every value as raw text ("" for empty cells).
    An empty file yields no rows.
    """
    try:
        df = pd.read_csv(path_or_buffer, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    except pd.errors.EmptyDataError:
        return []
    return df.to_dict(orient="records")
