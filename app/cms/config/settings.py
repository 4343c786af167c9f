"""Application settings -- reads from environment and ``.env`` file.

Values in the ``.env`` file win over the process environment. The file is
located through ``DOTENV_PATH`` and defaults to ``.env`` in the working
directory.
"""

from __future__ import annotations

import os

from ..render.options import (
    DEFAULT_FOLLOW_UP_DELAY_SECONDS,
    DEFAULT_MAX_BUTTONS,
    DEFAULT_MAX_FOLLOW_UP_DEPTH,
    DEFAULT_MAX_QUICK_REPLIES,
    RenderOptions,
)
from ..util.env_file import EnvFile
from ..util.singletons import register_singleton

ENV_PREFIX = "CHATCMS_"


class Settings:
    """Runtime configuration sourced from environment variables and ``.env``."""

    def __init__(self) -> None:
        self.env = EnvFile(os.getenv("DOTENV_PATH") or ".env")
        self.reload()

    def reload(self) -> None:
        """Re-read the ``.env`` file and environment variables."""
        self.env.load()
        e = self._read

        self.follow_up_delay_seconds: float = self._number(
            "FOLLOW_UP_DELAY_SECONDS", float, DEFAULT_FOLLOW_UP_DELAY_SECONDS
        )
        self.max_buttons: int = self._number("MAX_BUTTONS", int, DEFAULT_MAX_BUTTONS)
        self.max_quick_replies: int = self._number("MAX_QUICK_REPLIES", int, DEFAULT_MAX_QUICK_REPLIES)
        self.max_follow_up_depth: int = self._number("MAX_FOLLOW_UP_DEPTH", int, DEFAULT_MAX_FOLLOW_UP_DEPTH)

        # An empty value means "no substitution", there is no way to substitute with ""
        self.replace_empty_strings_with: str | None = e("REPLACE_EMPTY_STRINGS_WITH") or None

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            follow_up_delay_seconds=self.follow_up_delay_seconds,
            max_buttons=self.max_buttons,
            max_quick_replies=self.max_quick_replies,
            replace_empty_strings_with=self.replace_empty_strings_with,
            max_follow_up_depth=self.max_follow_up_depth,
        )

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        key = ENV_PREFIX + key
        return self.env.read(key) or os.getenv(key, "")

    def _number(self, key: str, kind: type[int] | type[float], default: int | float) -> int | float:
        raw = self._read(key).strip()
        if not raw:
            return kind(default)
        try:
            return kind(raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}{key} must be a number, got {raw!r}") from None


# Module-level singleton
cfg = Settings()


def _reset_cfg() -> None:
    global cfg
    cfg = Settings()


register_singleton("settings", _reset_cfg)
