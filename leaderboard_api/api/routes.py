"""API routes for the leaderboard service."""

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from leaderboard_api.config import Config
from leaderboard_api.datasources import LeaderboardSource
from leaderboard_api.models import LeaderboardResponse, ErrorResponse
from leaderboard_api.services import LeaderboardService
from .dependencies import get_config, get_datasource

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error reading leaderboard data."

router = APIRouter(prefix="/api")


def cors_headers(config: Config) -> dict[str, str]:
    """Cross-origin headers attached to every leaderboard response."""
    return {
        "Access-Control-Allow-Origin": config.cors_allow_origin,
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


@router.get(
    "/leaderboard",
    response_model=LeaderboardResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_leaderboard(
    datasource: LeaderboardSource = Depends(get_datasource),
    config: Config = Depends(get_config),
) -> JSONResponse:
    """
    Get the ranked course-completion leaderboard.
    
    Returns: success, message, updatedAt, data[name, redemptionStatus,
    skillBadges, arcadePoints, progress, rank]
    """
    service = LeaderboardService(
        datasource,
        max_courses=config.max_courses,
        skill_badge_total=config.skill_badge_total,
        arcade_game_total=config.arcade_game_total,
    )
    
    try:
        payload = await service.get_leaderboard_response()
    except Exception as e:
        logger.exception("Error processing leaderboard API")
        error = ErrorResponse(message=ERROR_MESSAGE, error=str(e))
        return JSONResponse(
            content=error.model_dump(),
            status_code=500,
            headers=cors_headers(config),
        )
    
    return JSONResponse(
        content=payload.model_dump(),
        status_code=200,
        headers=cors_headers(config),
    )


@router.options("/leaderboard", status_code=204)
async def options_leaderboard(config: Config = Depends(get_config)) -> Response:
    """CORS preflight: no content, headers only."""
    return Response(status_code=204, headers=cors_headers(config))
