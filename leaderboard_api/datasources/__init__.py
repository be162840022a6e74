from .base import LeaderboardSource
from .csv_file import CsvFileSource

__all__ = ["LeaderboardSource", "CsvFileSource"]
