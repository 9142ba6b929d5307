"""Trade sources: where raw CSV rows come from.

Each source returns a list of `core.loader.RowBatch`, one per file.
"""

from __future__ import annotations

from typing import Any

from core.errors import SourceError

from .base import TradeSource, rows_from_csv
from .github import GithubCsvSource
from .local import LocalCsvSource


def build_source(settings: Any) -> TradeSource:
    """Pick the source named by settings.TRADES_SOURCE (local | github)."""
    kind = str(settings.TRADES_SOURCE).lower()
    if kind == "local":
        return LocalCsvSource(settings.CSV_DIR)
    if kind == "github":
        return GithubCsvSource(
            repo=settings.GITHUB_REPO,
            path=settings.GITHUB_PATH,
            ref=settings.GITHUB_REF,
            token=settings.GITHUB_TOKEN or None,
            timeout=settings.GITHUB_TIMEOUT,
            workers=settings.FETCH_WORKERS,
        )
    raise SourceError(f"Unknown TRADES_SOURCE: {settings.TRADES_SOURCE}")


__all__ = ["TradeSource", "rows_from_csv", "GithubCsvSource", "LocalCsvSource", "build_source"]
