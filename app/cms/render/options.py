"""Options applied uniformly to every conversion of a converter."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FOLLOW_UP_DELAY_SECONDS = 4.0
DEFAULT_MAX_BUTTONS = 3
DEFAULT_MAX_QUICK_REPLIES = 5
DEFAULT_MAX_FOLLOW_UP_DEPTH = 10


@dataclass(frozen=True)
class RenderOptions:
    # Gives the user time to read the message preceding a text follow-up
    follow_up_delay_seconds: float = DEFAULT_FOLLOW_UP_DELAY_SECONDS
    max_buttons: int = DEFAULT_MAX_BUTTONS
    max_quick_replies: int = DEFAULT_MAX_QUICK_REPLIES
    # Some integrations fail when a field is empty
    replace_empty_strings_with: str | None = None
    max_follow_up_depth: int = DEFAULT_MAX_FOLLOW_UP_DEPTH

    def __post_init__(self) -> None:
        if self.follow_up_delay_seconds < 0:
            raise ValueError(f"follow_up_delay_seconds must be >= 0, got {self.follow_up_delay_seconds}")
        for name in ("max_buttons", "max_quick_replies", "max_follow_up_depth"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
