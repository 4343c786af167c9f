"""CMS content model.

Contents are immutable values built once per CMS fetch and shared, read
only, by every conversion. Derivations such as
:meth:`Text.clone_with_filtered_buttons` return new instances.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Literal, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .callback import Callback, ContentCallback

logger = logging.getLogger(__name__)


class ButtonStyle(StrEnum):
    BUTTON = "button"
    QUICK_REPLY = "quick_reply"


class Content(BaseModel):
    """Anything with a CMS identity."""

    model_config = ConfigDict(frozen=True)

    # An ID (eg. PRE_FAQ1)
    name: str = Field(min_length=1)


@runtime_checkable
class ContentWithKeywords(Protocol):
    """When any keyword is detected on a user input, the short text can be
    displayed so that users confirm their interest on this content."""

    @property
    def name(self) -> str: ...

    @property
    def short_text(self) -> str | None: ...

    @property
    def keywords(self) -> tuple[str, ...]: ...


class Button(Content):
    text: str
    callback: Callback


@dataclass(frozen=True)
class ContentCallbackWithKeywords:
    callback: ContentCallback
    # Does not contain all the content fields. Do not downcast
    content: ContentWithKeywords

    def to_button(self) -> Button:
        short_text = self.content.short_text
        if not short_text:
            short_text = self.content.name
            logger.warning(
                "%s %s without short_text. Assigning name to button text",
                self.callback.model,
                self.content.name,
            )
        return Button(name=self.content.name, text=short_text, callback=self.callback)


class Element(BaseModel):
    """Part of a carousel."""

    model_config = ConfigDict(frozen=True)

    buttons: tuple[Button, ...] = ()
    title: str | None = None
    subtitle: str | None = None
    img_url: str | None = None


class CommonFields(BaseModel):
    """Fields shared by every top-level content."""

    model_config = ConfigDict(frozen=True)

    name: str
    short_text: str | None = None
    keywords: tuple[str, ...] = ()
    follow_up: FollowUp | None = None


class TopContent(Content):
    """A content which can be displayed on its own (not part of another)."""

    # Useful to display in buttons or reports
    short_text: str | None = None
    keywords: tuple[str, ...] = ()
    follow_up: FollowUp | None = None

    @property
    def common(self) -> CommonFields:
        # Fields were validated when this content was built
        return CommonFields.model_construct(
            name=self.name,
            short_text=self.short_text,
            keywords=self.keywords,
            follow_up=self.follow_up,
        )


class Carousel(TopContent):
    kind: Literal["carousel"] = "carousel"
    elements: tuple[Element, ...] = ()


class Text(TopContent):
    kind: Literal["text"] = "text"
    # Full text
    text: str
    buttons: tuple[Button, ...] = ()
    buttons_style: ButtonStyle = ButtonStyle.BUTTON

    def clone_with_filtered_buttons(self, only_keep: Callable[[Button], bool]) -> Text:
        """Useful to hide a button (eg. when the agents queue is closed)."""
        return self.model_copy(update={"buttons": tuple(b for b in self.buttons if only_keep(b))})


class Url(TopContent):
    # follow_up is stored but not rendered yet
    kind: Literal["url"] = "url"
    url: str


class Image(TopContent):
    kind: Literal["image"] = "image"
    img_url: str


class StartUp(TopContent):
    kind: Literal["startUp"] = "startUp"
    text: str
    img_url: str | None = None
    buttons: tuple[Button, ...] = ()


# A content which is automatically displayed after another one
FollowUp = Annotated[Union[Text, Carousel, Image, StartUp], Field(discriminator="kind")]

for _model in (CommonFields, TopContent, Carousel, Text, Url, Image, StartUp):
    _model.model_rebuild()
