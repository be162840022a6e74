"""FastAPI dependencies for dependency injection."""

from leaderboard_api.config import Config
from leaderboard_api.datasources import LeaderboardSource

# Global instances - initialized at app startup
_datasource: LeaderboardSource | None = None
_config: Config | None = None


def set_datasource(datasource: LeaderboardSource) -> None:
    """Set the global datasource instance."""
    global _datasource
    _datasource = datasource


def get_datasource() -> LeaderboardSource:
    """Get the global datasource instance for dependency injection."""
    if _datasource is None:
        raise RuntimeError("LeaderboardSource not initialized. Call set_datasource() first.")
    return _datasource


def set_config(config: Config) -> None:
    """Set the active configuration used by route dependencies."""
    global _config
    _config = config


def get_config() -> Config:
    """Get the active configuration, falling back to the environment."""
    if _config is None:
        return Config.from_env()
    return _config
