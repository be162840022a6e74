"""Leaderboard service for ranking participants by course completion."""

import re
import unicodedata
from datetime import datetime
from typing import Any

from leaderboard_api.datasources import LeaderboardSource
from leaderboard_api.models import LeaderboardEntry, LeaderboardResponse

# Column headers of the course-completion export
NAME_COLUMN = "User Name"
REDEMPTION_COLUMN = "Access Code Redemption Status"
SKILL_BADGES_COLUMN = "# of Skill Badges Completed"
ARCADE_GAMES_COLUMN = "# of Arcade Games Completed"

DEFAULT_NAME = "Unknown Name"
MAX_COURSES = 20
SKILL_BADGE_TOTAL = 19
ARCADE_GAME_TOTAL = 1

SUCCESS_MESSAGE = "Leaderboard data fetched successfully."

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_count(value: Any) -> int:
    """
    Parse a completion count, tolerating messy spreadsheet cells.
    
    Takes the leading integer of the cell ("12abc" -> 12, "3.9" -> 3).
    Anything unparsable or negative counts as 0.
    """
    if value is None:
        return 0
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return 0
    try:
        count = int(match.group(1))
    except ValueError:
        # Past the interpreter's int string conversion limit
        return 0
    return max(0, count)


def parse_redemption(value: Any) -> bool:
    """Return True iff the status cell reads 'yes' (any case, any padding)."""
    if value is None:
        return False
    return str(value).strip().lower() == "yes"


def calculate_progress(skill_badges: int, arcade_points: int, max_courses: int = MAX_COURSES) -> int:
    """
    Completion percentage, rounded half up and capped at 100.
    """
    if max_courses <= 0:
        return 100
    total = max(0, skill_badges + arcade_points)
    if total >= max_courses:
        return 100
    # floor(total / max_courses * 100 + 0.5) in integer arithmetic
    return (200 * total + max_courses) // (2 * max_courses)


def _primary_weight(char: str) -> tuple[int, str]:
    if char.isalpha():
        return (2, char)
    if char.isdigit():
        return (1, char)
    # Whitespace, punctuation and symbols sort ahead of digits and letters
    return (0, char)


def name_collation_key(name: str) -> tuple[tuple[tuple[int, str], ...], str, str]:
    """
    Sort key approximating locale-aware string comparison.
    
    Compares letters ignoring accents and case first, then accents,
    then case with lowercase ahead of uppercase. Punctuation orders
    before digits, digits before letters.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    primary = tuple(_primary_weight(c) for c in base.casefold())
    return (primary, decomposed.casefold(), decomposed.swapcase())


def strip_repeated_header(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Drop the first row when it repeats the header labels."""
    if rows and rows[0].get(NAME_COLUMN) == NAME_COLUMN:
        return rows[1:]
    return rows


def format_updated_at(updated_at: datetime) -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2024-05-01T10:00:00.000Z"""
    return updated_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _ranking_key(entry: dict[str, Any]) -> tuple:
    return (
        not entry["redemptionStatus"],
        -entry["skillBadges"],
        -entry["arcadePoints"],
        name_collation_key(entry["name"]),
    )


class LeaderboardService:
    """Service for building the ranked leaderboard from raw rows."""

    def __init__(
        self,
        source: LeaderboardSource,
        max_courses: int = MAX_COURSES,
        skill_badge_total: int = SKILL_BADGE_TOTAL,
        arcade_game_total: int = ARCADE_GAME_TOTAL,
    ):
        self.source = source
        self.max_courses = max_courses
        self.skill_badge_total = skill_badge_total
        self.arcade_game_total = arcade_game_total

    def normalize_row(self, row: dict[str, Any]) -> dict[str, Any]:
        """
        Map a raw CSV row to unranked leaderboard fields.
        
        Args:
            row: Raw row keyed by column header
            
        Returns:
            Dict with every LeaderboardEntry field except rank
        """
        skill_badges = parse_count(row.get(SKILL_BADGES_COLUMN))
        arcade_points = parse_count(row.get(ARCADE_GAMES_COLUMN))
        name = row.get(NAME_COLUMN) or DEFAULT_NAME
        
        return {
            "name": str(name),
            "redemptionStatus": parse_redemption(row.get(REDEMPTION_COLUMN)),
            "skillBadges": skill_badges,
            "arcadePoints": arcade_points,
            "progress": calculate_progress(skill_badges, arcade_points, self.max_courses),
            "skillBadgesStr": f"{skill_badges}/{self.skill_badge_total}",
            "arcadePointsStr": f"{arcade_points}/{self.arcade_game_total}",
        }

    def rank_rows(self, rows: list[dict[str, Any]]) -> list[LeaderboardEntry]:
        """
        Normalize, sort and rank raw rows.
        
        Order: redeemed first, then skill badges desc, arcade points desc,
        name asc. Rows equal on every key keep their input order.
        
        Returns:
            List of LeaderboardEntry sorted by rank (1 = best)
        """
        normalized = [self.normalize_row(row) for row in strip_repeated_header(rows)]
        
        # list.sort is stable
        normalized.sort(key=_ranking_key)
        
        return [
            LeaderboardEntry(rank=i + 1, **entry)
            for i, entry in enumerate(normalized)
        ]

    async def get_leaderboard(self) -> list[LeaderboardEntry]:
        """Read the source and return the ranked leaderboard."""
        rows = await self.source.read_rows()
        return self.rank_rows(rows)

    async def get_leaderboard_response(self) -> LeaderboardResponse:
        """
        Build the full success payload.
        
        Returns:
            LeaderboardResponse with ranked data and the source update time
        """
        data = await self.get_leaderboard()
        updated_at = await self.source.get_updated_at()
        
        return LeaderboardResponse(
            success=True,
            message=SUCCESS_MESSAGE,
            updatedAt=format_updated_at(updated_at),
            data=data,
        )
