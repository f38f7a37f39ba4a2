"""Flat JSON file persistence for the leaderboard."""

import json
import os
import tempfile
import typing as t
from pathlib import Path


class JsonScoreFile:
    """Read and overwrite a JSON array of ``{name, score}`` objects.

    :param path: Location of the scores file.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        """Check whether the scores file is present.

        :return: True if the file exists.
        """
        return self.path.is_file()

    def load(self) -> list[t.Any]:
        """Load the raw array stored in the file.

        :return: The decoded JSON array, elements unvalidated.
        :raises OSError: If the file cannot be read.
        :raises ValueError: If the content is not a JSON array.
        """
        with self.path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return data

    def save(self, entries: list[dict[str, t.Any]]) -> None:
        """Atomically overwrite the file with ``entries``.

        :param entries: Rows to write, in leaderboard order.
        :raises OSError: If the file cannot be written.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            text=True,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entries, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
