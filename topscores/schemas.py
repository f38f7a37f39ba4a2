"""Pydantic schemas for API requests and responses."""

import typing as t

from pydantic import BaseModel, Field

from .config import MAX_SCORE, MIN_SCORE


class ScoreIn(BaseModel):
    """Schema for a submitted score.

    ``strict`` keeps booleans and numeric strings from being coerced into a
    score.
    """

    name: t.Annotated[str, Field(min_length=1, strict=True)]
    score: t.Annotated[float, Field(ge=MIN_SCORE, le=MAX_SCORE, strict=True)]


class ScoreOut(BaseModel):
    """Schema for a leaderboard row."""

    name: str
    score: float


class ScoresResp(BaseModel):
    """Response schema for mutating leaderboard operations."""

    ok: t.Literal[True]
    message: str
    scores: list[ScoreOut]


class HealthResp(BaseModel):
    """Response schema for the health check."""

    status: t.Literal["ok"]
