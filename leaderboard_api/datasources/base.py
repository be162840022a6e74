"""Abstract base class for leaderboard data sources."""

from abc import ABC, abstractmethod
from datetime import datetime


class LeaderboardSource(ABC):
    """
    Abstract interface for raw leaderboard records.
    
    Rows are returned exactly as exported, keyed by column header with
    every cell as a string. Normalization is left to the service layer.
    """

    @abstractmethod
    async def read_rows(self) -> list[dict[str, str]]:
        """
        Read every data row from the source.
        
        Returns:
            List of row dicts in source order
            
        Raises:
            FileNotFoundError: If the backing file does not exist
        """
        pass

    @abstractmethod
    async def get_updated_at(self) -> datetime:
        """
        Get the last modification time of the source.
        
        Returns:
            Timezone-aware UTC datetime
        """
        pass

    async def close(self) -> None:
        """
        Clean up resources.
        
        Override this if the data source holds resources that need cleanup.
        """
        pass
