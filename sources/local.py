"""Trade-log CSVs from a local directory."""

from __future__ import annotations

from pathlib import Path
from typing import List

from core.errors import SourceError
from core.loader import RowBatch
from utils.logger import get_logger, log_extra

from .base import rows_from_csv

log = get_logger("tradelog.sources.local")


class LocalCsvSource:
    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def describe(self) -> str:
        return str(self.directory)

    def list_files(self) -> List[Path]:
        if not self.directory.is_dir():
            raise SourceError(f"CSV directory not found: {self.directory}")
        return sorted(p for p in self.directory.iterdir() if p.is_file() and p.suffix.lower() == ".csv")

    def read_batches(self) -> List[RowBatch]:
        files = self.list_files()
        log.info("found csv files", **log_extra(count=len(files), directory=str(self.directory)))

        batches: List[RowBatch] = []
        for path in files:
            try:
                rows = rows_from_csv(path)
            except (OSError, ValueError) as e:
                log.warning("could not read csv", **log_extra(file=path.name, reason=str(e)))
                batches.append(RowBatch(path.name, [], error=str(e)))
                continue
            log.debug("read csv", **log_extra(file=path.name, rows=len(rows)))
            batches.append(RowBatch(path.name, rows))
        return batches
