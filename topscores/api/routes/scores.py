"""API routes for the leaderboard."""

import logging

from fastapi import APIRouter, Depends

from ...deps import get_leaderboard
from ...schemas import ScoreIn, ScoreOut, ScoresResp
from ...service import LeaderboardService

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/add_score", response_model=ScoresResp)
def add_score(
    body: ScoreIn,
    leaderboard: LeaderboardService = Depends(get_leaderboard),
) -> dict:
    """Submit a score.

    :param body: Validated name and score.
    :param leaderboard: Injected leaderboard service.
    :return: Confirmation and the updated leaderboard.
    """
    scores = leaderboard.add_score(body.name, body.score)
    logger.debug("[API] add_score name=%s score=%s", body.name, body.score)
    return {
        "ok": True,
        "message": "Score added successfully",
        "scores": [e.to_dict() for e in scores],
    }


@router.get("/get_leaderboard", response_model=list[ScoreOut])
def get_leaderboard_scores(
    leaderboard: LeaderboardService = Depends(get_leaderboard),
) -> list[dict]:
    """Get the leaderboard, highest score first.

    :param leaderboard: Injected leaderboard service.
    :return: Leaderboard rows.
    """
    return [e.to_dict() for e in leaderboard.scores()]


@router.post("/clear_leaderboard", response_model=ScoresResp)
def clear_leaderboard(
    leaderboard: LeaderboardService = Depends(get_leaderboard),
) -> dict:
    """Remove every score.

    :param leaderboard: Injected leaderboard service.
    :return: Confirmation and the empty leaderboard.
    """
    scores = leaderboard.clear()
    return {
        "ok": True,
        "message": "Leaderboard cleared",
        "scores": [e.to_dict() for e in scores],
    }
