"""
Trade-log CSVs from a directory of a GitHub repository.

The directory listing comes from the contents API; files are downloaded in
parallel. A file that fails to download becomes a batch with `error` set,
so the loader skips it and keeps the rest (best effort).
"""

from __future__ import annotations

import io
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple

import requests  # type: ignore[import-untyped]

from core.errors import SourceError
from core.loader import RowBatch
from utils.logger import get_logger, log_extra

from .base import rows_from_csv

GITHUB_API = "https://api.github.com"

log = get_logger("tradelog.sources.github")


class GithubCsvSource:
    def __init__(
        self,
        repo: str,
        path: str = "",
        ref: str = "main",
        token: Optional[str] = None,
        timeout: float = 20.0,
        workers: int = 8,
    ) -> None:
        if not repo or "/" not in repo:
            raise SourceError(f"GitHub repo must look like owner/name, got {repo!r}")
        self.repo = repo
        self.path = path.strip("/")
        self.ref = ref
        self.token = token
        self.timeout = timeout
        self.workers = max(1, int(workers))

    def describe(self) -> str:
        return f"github:{self.repo}/{self.path}@{self.ref}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def list_files(self) -> List[Tuple[str, str]]:
        """(name, download_url) for every .csv in the directory, in listing order."""
        url = f"{GITHUB_API}/repos/{self.repo}/contents/{self.path}"
        try:
            resp = requests.get(url, headers=self._headers(), params={"ref": self.ref}, timeout=self.timeout)
            resp.raise_for_status()
            entries = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise SourceError(f"could not list {self.describe()}: {e}") from e

        if not isinstance(entries, list):
            raise SourceError(f"{self.describe()} is not a directory")

        return [
            (e["name"], e["download_url"])
            for e in entries
            if e.get("type") == "file" and str(e.get("name", "")).lower().endswith(".csv") and e.get("download_url")
        ]

    def _fetch(self, entry: Tuple[str, str]) -> RowBatch:
        name, url = entry
        try:
            resp = requests.get(url, headers=self._headers(), timeout=self.timeout)
            resp.raise_for_status()
            rows = rows_from_csv(io.StringIO(resp.text))
        except (requests.RequestException, ValueError) as e:
            log.warning("could not fetch csv", **log_extra(file=name, reason=str(e)))
            return RowBatch(name, [], error=str(e))
        log.debug("fetched csv", **log_extra(file=name, rows=len(rows)))
        return RowBatch(name, rows)

    def read_batches(self) -> List[RowBatch]:
        files = self.list_files()
        log.info("found csv files", **log_extra(count=len(files), source=self.describe()))
        if not files:
            return []
        # map() keeps listing order regardless of completion order
        with ThreadPoolExecutor(max_workers=min(self.workers, len(files))) as pool:
            return list(pool.map(self._fetch, files))
