"""Leaderboard models for API responses."""

from pydantic import BaseModel, Field, ConfigDict


class LeaderboardEntry(BaseModel):
    """
    A single ranked participant on the leaderboard.
    """
    model_config = ConfigDict(populate_by_name=True)
    
    name: str
    redemptionStatus: bool = Field(description="Whether the access code was redeemed")
    skillBadges: int = Field(ge=0, description="Completed skill badges")
    arcadePoints: int = Field(ge=0, description="Completed arcade games")
    progress: int = Field(ge=0, le=100, description="Completion percentage")
    skillBadgesStr: str = Field(description="Skill badges as 'done/total'")
    arcadePointsStr: str = Field(description="Arcade games as 'done/total'")
    rank: int = Field(ge=1, description="1-based position after sorting")


class LeaderboardResponse(BaseModel):
    """Successful leaderboard payload."""
    
    success: bool = True
    message: str
    updatedAt: str = Field(description="CSV modification time, ISO-8601 UTC")
    data: list[LeaderboardEntry]


class ErrorResponse(BaseModel):
    """Structured error payload."""
    
    success: bool = False
    message: str
    error: str
