"""
Trade loader.

Normalizes every row of every source batch, keeps valid trades and merges
them newest first. A failing batch is reported and skipped; it never
aborts the rest of the load.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Sequence

from utils.logger import get_logger, log_extra

from .normalizer import normalize_row
from .trade import Trade, chrono_key

log = get_logger("tradelog.loader")


class RowBatch(NamedTuple):
    """Rows read from one source file. `error` is set when the read failed."""

    filename: str
    rows: Sequence[Mapping[str, Any]]
    error: Optional[str] = None


@dataclass(frozen=True)
class FileReport:
    filename: str
    loaded: int
    dropped: int = 0  # missing symbol, position type or date
    unparsed: int = 0  # kept trades with at least one unparseable numeric field


@dataclass(frozen=True)
class SkippedFile:
    filename: str
    reason: str


@dataclass
class LoadResult:
    trades: List[Trade] = field(default_factory=list)
    files: List[FileReport] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.trades)

    def loaded_per_file(self) -> dict:
        return {f.filename: f.loaded for f in self.files}


def _load_batch(batch: RowBatch) -> tuple[List[Trade], FileReport]:
    kept: List[Trade] = []
    dropped = 0
    unparsed = 0
    for row in batch.rows:
        trade = normalize_row(row, batch.filename)
        if not trade.is_valid:
            dropped += 1
            continue
        if trade.parse_errors:
            unparsed += 1
        kept.append(trade)
    return kept, FileReport(batch.filename, len(kept), dropped, unparsed)


def load_batches(batches: Iterable[Any]) -> LoadResult:
    """
    Accepts RowBatch objects or plain (filename, rows) pairs.
    Result trades are sorted descending by (date, entry time); ties keep
    input order.
    """
    result = LoadResult()
    merged: List[Trade] = []

    for raw in batches:
        batch = RowBatch(*raw)
        if batch.error is not None:
            log.warning("skipping file", **log_extra(file=batch.filename, reason=batch.error))
            result.skipped.append(SkippedFile(batch.filename, batch.error))
            continue
        try:
            kept, report = _load_batch(batch)
        except Exception as e:
            # rows may be a lazy reader; its I/O failures stay local to this file
            log.warning("skipping file", **log_extra(file=batch.filename, reason=str(e)))
            result.skipped.append(SkippedFile(batch.filename, str(e)))
            continue

        log.info(
            "loaded file",
            **log_extra(file=report.filename, loaded=report.loaded, dropped=report.dropped, unparsed=report.unparsed),
        )
        result.files.append(report)
        merged.extend(kept)

    result.trades = sorted(merged, key=chrono_key, reverse=True)
    log.info("total trades loaded", **log_extra(total=result.total, files=len(result.files), skipped=len(result.skipped)))
    return result


def load(batches: Iterable[Any]) -> List[Trade]:
    return load_batches(batches).trades


__all__ = ["RowBatch", "FileReport", "SkippedFile", "LoadResult", "load_batches", "load"]
