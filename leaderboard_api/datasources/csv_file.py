"""CSV file data source implementation."""

import asyncio
import logging
import os
from datetime import datetime, timezone

import pandas as pd

from .base import LeaderboardSource

logger = logging.getLogger(__name__)


class CsvFileSource(LeaderboardSource):
    """
    Data source reading a course-completion CSV export from disk.
    
    The file is re-read on every call; nothing is cached between requests.
    """

    def __init__(self, path: str):
        """
        Initialize CSV data source.
        
        Args:
            path: Filesystem path of the CSV export
        """
        self.path = path

    def _ensure_exists(self) -> None:
        if not os.path.exists(self.path):
            raise FileNotFoundError(f"CSV file not found at path: {self.path}")

    def _read_csv(self, **kwargs) -> pd.DataFrame:
        return pd.read_csv(
            self.path,
            engine="python",
            dtype=str,
            keep_default_na=False,
            index_col=False,
            encoding="utf-8-sig",
            encoding_errors="replace",
            **kwargs,
        )

    def _read(self) -> list[dict[str, str]]:
        self._ensure_exists()
        try:
            header = self._read_csv(nrows=0).columns
            # Cells past the header width (trailing commas) are dropped
            df = self._read_csv(usecols=list(range(len(header))))
        except pd.errors.EmptyDataError:
            logger.debug(f"{self.path} is empty")
            return []
        
        # Short rows leave NaN in the trailing cells
        df = df.fillna("")
        rows = df.to_dict(orient="records")
        logger.debug(f"Read {len(rows)} rows from {self.path}")
        return rows

    def _stat_mtime(self) -> datetime:
        self._ensure_exists()
        return datetime.fromtimestamp(os.stat(self.path).st_mtime, tz=timezone.utc)

    async def read_rows(self) -> list[dict[str, str]]:
        return await asyncio.to_thread(self._read)

    async def get_updated_at(self) -> datetime:
        return await asyncio.to_thread(self._stat_mtime)
