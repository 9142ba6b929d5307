"""Trade-log ingestion: canonical Trade model, row normalization, loading.

Pure in-memory code; file and network access lives in `sources`.
"""

from .trade import Trade, Strategy, PositionType
from .normalizer import normalize_row
from .classify import classify_strategy
from .loader import RowBatch, LoadResult, load_batches, load

__all__ = [
    "Trade",
    "Strategy",
    "PositionType",
    "normalize_row",
    "classify_strategy",
    "RowBatch",
    "LoadResult",
    "load_batches",
    "load",
]
