"""Serve the leaderboard API: ``python -m topscores``."""

import logging

import uvicorn

from . import config


def main() -> None:
    """Configure logging and run the server until SIGINT/SIGTERM."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "topscores.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
