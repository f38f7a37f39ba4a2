from fastapi import Request

from .service import LeaderboardService


def get_leaderboard(request: Request) -> LeaderboardService:
    """Resolve the leaderboard owned by the running app.

    :param request: The incoming request.
    :return: The app's leaderboard service.
    """
    return request.app.state.leaderboard
