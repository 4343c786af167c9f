"""Read-only view of a ``.env`` file."""

from __future__ import annotations

from pathlib import Path

from dotenv import dotenv_values


class EnvFile:
    """Parses a ``.env`` file with python-dotenv.

    A missing file behaves like an empty one. Values are loaded once and
    refreshed with :meth:`load`.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._values: dict[str, str] = {}
        self.load()

    def load(self) -> None:
        if not self.path.is_file():
            self._values = {}
            return
        self._values = {
            key: value
            for key, value in dotenv_values(self.path).items()
            if value is not None
        }

    def read(self, key: str) -> str:
        return self._values.get(key, "")

    def keys(self) -> list[str]:
        return list(self._values)
