"""Application configuration."""

import os
from dataclasses import dataclass, field


def _default_csv_path() -> str:
    return os.path.join(os.getcwd(), "abc.csv")


@dataclass
class Config:
    """Application configuration loaded from environment variables."""
    
    # API settings
    host: str = "0.0.0.0"
    port: int = 8000
    
    # Leaderboard source
    csv_path: str = field(default_factory=_default_csv_path)
    
    # Progress denominator and display totals
    max_courses: int = 20
    skill_badge_total: int = 19
    arcade_game_total: int = 1
    
    cors_allow_origin: str = "*"
    
    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            csv_path=os.getenv("LEADERBOARD_CSV_PATH", _default_csv_path()),
            max_courses=int(os.getenv("MAX_COURSES", "20")),
            skill_badge_total=int(os.getenv("SKILL_BADGE_TOTAL", "19")),
            arcade_game_total=int(os.getenv("ARCADE_GAME_TOTAL", "1")),
            cors_allow_origin=os.getenv("CORS_ALLOW_ORIGIN", "*"),
        )
