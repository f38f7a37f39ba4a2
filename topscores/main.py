"""FastAPI application main module."""

import logging
import os
import typing as t
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .api.routes import scores as r_scores
from .schemas import HealthResp
from .service import LeaderboardService
from .storage import JsonScoreFile

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input. Name and score are required."


@asynccontextmanager
async def lifespan(app: FastAPI) -> t.AsyncGenerator[None, None]:
    """Replay the persisted leaderboard before serving requests.

    :param app: FastAPI app instance.
    :yield: None.
    """
    leaderboard: LeaderboardService = app.state.leaderboard
    count = leaderboard.load()
    logger.info(
        "[API] leaderboard ready: %d/%d entries",
        count,
        leaderboard.store.capacity,
    )
    yield
    logger.info("[API] shutting down")


def _parse_origins(raw: str | None = None) -> list[str]:
    raw = (raw or os.getenv("FRONTEND_URL") or config.FRONTEND_URL).strip()
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


# standardized error envelope
async def http_exc_handler(
    _: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle HTTP exceptions with standardized error envelope.

    :param _: The request object.
    :param exc: The HTTP exception.
    :return: Standardized error envelope.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": str(exc.detail)},
    )


async def validation_exc_handler(
    _: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Reject malformed submissions as a client error.

    :param _: The request object.
    :param exc: The validation error.
    :return: Standardized error envelope with status 400.
    """
    logger.debug("[API] rejected input: %s", exc.errors())
    return JSONResponse(
        status_code=400,
        content={"ok": False, "error": INVALID_INPUT},
    )


async def unhandled_exc_handler(_: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions with standardized error envelope.

    :return: Standardized error envelope.
    """
    logger.exception("[API] unhandled error", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"ok": False, "error": "internal_error"},
    )


def health() -> dict:
    """Health check endpoint.

    :return: Health status.
    """
    return {"status": "ok"}


def healthz() -> dict:
    """Liveness check endpoint.

    :return: Liveness status.
    """
    return {"ready": True}


def readyz() -> dict:
    """Readiness check endpoint.

    :return: Readiness status.
    """
    return {"ready": True}


def version() -> dict:
    """Version information endpoint.

    :return: Version information.
    """
    return {"version": {"git": config.GIT_SHA, "builtAt": config.BUILT_AT}}


def create_app(
    scores_file: str | os.PathLike | None = None,
    capacity: int | None = None,
    origins: list[str] | None = None,
) -> FastAPI:
    """Build the leaderboard API.

    :param scores_file: Scores file path, defaults to ``SCORES_FILE``.
    :param capacity: Leaderboard size, defaults to ``LEADERBOARD_CAPACITY``.
    :param origins: Allowed CORS origins, defaults to ``FRONTEND_URL``.
    :return: The configured application.
    """
    app = FastAPI(title="Top Scores API", lifespan=lifespan)
    app.state.leaderboard = LeaderboardService(
        config.LEADERBOARD_CAPACITY if capacity is None else capacity,
        JsonScoreFile(config.SCORES_FILE if scores_file is None else scores_file),
    )

    allow_origins = _parse_origins() if origins is None else origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials="*" not in allow_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # prometheus metrics at /metrics (exclude noise)
    Instrumentator(
        should_group_status_codes=False,
        excluded_handlers=["/metrics", "/health", "/healthz", "/readyz"],
        registry=CollectorRegistry(),
    ).instrument(app).expose(app, include_in_schema=False)

    app.add_exception_handler(StarletteHTTPException, http_exc_handler)
    app.add_exception_handler(RequestValidationError, validation_exc_handler)
    app.add_exception_handler(Exception, unhandled_exc_handler)

    # routes
    app.include_router(r_scores.router)
    app.add_api_route("/health", health, methods=["GET"], response_model=HealthResp)
    app.add_api_route("/healthz", healthz, methods=["GET"])
    app.add_api_route("/readyz", readyz, methods=["GET"])
    app.add_api_route("/version", version, methods=["GET"])
    return app


app = create_app()
