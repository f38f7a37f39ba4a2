import os
from datetime import datetime, timezone
from pathlib import Path

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS: comma-separated origins, "*" allows any
FRONTEND_URL = os.getenv("FRONTEND_URL", "*")

# Leaderboard
LEADERBOARD_CAPACITY = int(os.getenv("LEADERBOARD_CAPACITY", "100"))
MIN_SCORE = 0
MAX_SCORE = 100

# Persistence
SCORES_FILE = os.getenv(
    "SCORES_FILE",
    str(Path(__file__).resolve().parents[1] / "data" / "scores.json"),
)

# Build metadata reported by /version
GIT_SHA = os.getenv("GIT_SHA", "dev")
BUILT_AT = os.getenv("BUILT_AT") or datetime.now(timezone.utc).isoformat()
