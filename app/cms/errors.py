"""Exceptions raised while converting CMS content into channel messages.

Recoverable degradations (missing short text, too many buttons) are logged
and never raised. Everything here is a structural problem that aborts the
conversion of the top-level content.
"""

from __future__ import annotations


class CmsError(Exception):
    """Base class for every error raised by this package."""


class ConversionError(CmsError):
    """A content could not be converted into channel messages."""

    def __init__(self, message: str, *, content_name: str | None = None) -> None:
        super().__init__(message)
        self.content_name = content_name


class UnknownFollowUpError(ConversionError):
    """The follow-up of a content is not one of the renderable kinds."""


class UnsupportedContentError(ConversionError):
    """There is no renderer for this kind of top-level content."""


class FollowUpCycleError(ConversionError):
    """A follow-up chain points back to a content already being rendered."""

    def __init__(self, chain: tuple[str, ...]) -> None:
        super().__init__(
            "Follow-up cycle detected: " + " -> ".join(chain),
            content_name=chain[-1],
        )
        self.chain = chain


class FollowUpDepthError(ConversionError):
    """A follow-up chain is longer than the configured maximum depth."""

    def __init__(self, chain: tuple[str, ...], max_depth: int) -> None:
        super().__init__(
            f"Follow-up chain starting at {chain[0]} exceeds {max_depth} follow-ups",
            content_name=chain[-1],
        )
        self.chain = chain
        self.max_depth = max_depth
