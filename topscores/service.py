"""Leaderboard state owned by the HTTP layer: the store, its file and a lock."""

import logging
import threading

from pydantic import ValidationError

from .heap import BoundedTopStore, ScoreEntry
from .schemas import ScoreIn
from .storage import JsonScoreFile

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Serialize access to a :class:`BoundedTopStore` and persist it.

    Every mutation is followed by a full rewrite of the scores file while
    the lock is still held, so the file always matches some in-memory
    state. Persistence failures are logged and never undo the mutation.

    :param capacity: Number of scores retained.
    :param scores_file: Where the leaderboard is persisted.
    """

    def __init__(self, capacity: int, scores_file: JsonScoreFile) -> None:
        self.store = BoundedTopStore(capacity)
        self.scores_file = scores_file
        self._lock = threading.Lock()

    def load(self) -> int:
        """Replay the persisted leaderboard into the store, in file order.

        The store is emptied first, so a missing, unreadable or malformed
        file leaves it empty and a repeated load never duplicates rows.

        :return: Number of entries replayed.
        """
        with self._lock:
            self.store.clear()
        if not self.scores_file.exists():
            logger.info("[STORE] no scores file at %s", self.scores_file.path)
            return 0
        try:
            rows = self.scores_file.load()
        except (OSError, ValueError, RecursionError) as e:
            logger.error(
                "[STORE] failed to load %s, starting empty: %s",
                self.scores_file.path,
                e,
            )
            return 0

        replayed = 0
        with self._lock:
            for i, row in enumerate(rows):
                try:
                    item = ScoreIn.model_validate(row)
                except ValidationError:
                    logger.warning("[STORE] skipping malformed row %d: %r", i, row)
                    continue
                self.store.insert(ScoreEntry(name=item.name, score=item.score))
                replayed += 1
        logger.info(
            "[STORE] loaded %d of %d rows from %s",
            replayed,
            len(rows),
            self.scores_file.path,
        )
        return replayed

    def add_score(self, name: str, score: float) -> list[ScoreEntry]:
        """Insert a validated score and persist the result.

        :param name: Player name.
        :param score: Score value.
        :return: The leaderboard after the insert.
        """
        with self._lock:
            self.store.insert(ScoreEntry(name=name, score=score))
            scores = self.store.get_sorted_scores()
            self._persist(scores)
        return scores

    def clear(self) -> list[ScoreEntry]:
        """Empty the leaderboard and persist the empty list.

        :return: The (empty) leaderboard.
        """
        with self._lock:
            self.store.clear()
            scores = self.store.get_sorted_scores()
            self._persist(scores)
        logger.info("[STORE] leaderboard cleared")
        return scores

    def scores(self) -> list[ScoreEntry]:
        """Read the leaderboard without persisting.

        :return: Entries sorted by score, highest first.
        """
        with self._lock:
            return self.store.get_sorted_scores()

    def _persist(self, scores: list[ScoreEntry]) -> None:
        try:
            self.scores_file.save([e.to_dict() for e in scores])
        except OSError as e:
            logger.error(
                "[STORE] failed to persist %s: %s",
                self.scores_file.path,
                e,
            )
