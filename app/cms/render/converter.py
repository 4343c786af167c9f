"""Converts CMS contents into channel messages.

A :class:`MessageConverter` is configured once and reused for any number of
conversions. Conversion is a pure recursive function of the content and the
options: the content is never mutated and nothing is kept between calls, so
one converter can be shared between threads.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from typing import Any

from .. import contents as cms
from ..config import settings
from ..contents import ButtonStyle
from ..errors import (
    FollowUpCycleError,
    FollowUpDepthError,
    UnknownFollowUpError,
    UnsupportedContentError,
)
from ..util.singletons import register_singleton
from .messages import (
    CarouselData,
    CarouselElementData,
    CarouselMessage,
    ChannelMessage,
    ChannelMessages,
    ImageData,
    ImageMessage,
    MessageButton,
    QuickReply,
    TextData,
    TextMessage,
)
from .options import RenderOptions

logger = logging.getLogger(__name__)

# The previous text usually introduces the carousel, so it needs less time
CAROUSEL_FOLLOW_UP_DELAY_SECONDS = 2.0

_Chain = tuple[str, ...]
_Renderer = Callable[[Any, float], ChannelMessages]


class MessageConverter:
    def __init__(self, options: RenderOptions | None = None, **overrides: Any) -> None:
        options = options or settings.cfg.render_options()
        if overrides:
            options = dataclasses.replace(options, **overrides)
        self.options = options
        # kind -> (renderer, delay when displayed as a follow-up)
        self._kinds: dict[str, tuple[_Renderer, float]] = {
            "text": (self._render_text, options.follow_up_delay_seconds),
            "carousel": (self._render_carousel, CAROUSEL_FOLLOW_UP_DELAY_SECONDS),
            "image": (self._render_image, 0.0),
            "startUp": (self._render_start_up, 0.0),
        }

    @property
    def renderable_kinds(self) -> frozenset[str]:
        return frozenset(self._kinds)

    # -- public API --------------------------------------------------------

    def convert(self, content: cms.TopContent) -> ChannelMessages:
        """Render any top-level content, dispatching on its kind."""
        kind = getattr(content, "kind", None)
        if kind not in self._kinds:
            raise UnsupportedContentError(
                f"Cannot render {type(content).__name__} {content.name}",
                content_name=content.name,
            )
        return self._render(content, 0.0, ())

    def text(self, text: cms.Text, delay_s: float = 0.0) -> ChannelMessages:
        return self._render(text, delay_s, ())

    def carousel(self, carousel: cms.Carousel, delay_s: float = 0.0) -> ChannelMessages:
        return self._render(carousel, delay_s, ())

    def start_up(self, start_up: cms.StartUp) -> ChannelMessages:
        return self._render(start_up, 0.0, ())

    def image(self, image: cms.Image) -> ChannelMessages:
        return self._render(image, 0.0, ())

    # -- rendering ---------------------------------------------------------

    def _render(self, content: cms.TopContent, delay_s: float, chain: _Chain) -> ChannelMessages:
        chain = (*chain, content.name)
        renderer, _ = self._kinds[content.kind]
        msgs = renderer(content, delay_s)
        logger.debug("Rendered %s %s (follow-up depth %d)", content.kind, content.name, len(chain) - 1)
        return self._append_follow_up(msgs, content, chain)

    def _render_text(self, text: cms.Text, delay_s: float) -> TextMessage:
        buttons = self._convert_buttons(text.buttons, text.buttons_style, text.name)
        data = TextData(text=self._str(text.text))
        if text.buttons_style == ButtonStyle.QUICK_REPLY:
            return TextMessage(delay=delay_s, data=data, replies=buttons)
        return TextMessage(delay=delay_s, data=data, buttons=buttons)

    def _render_carousel(self, carousel: cms.Carousel, delay_s: float) -> CarouselMessage:
        elements = tuple(self._element(e, carousel.name) for e in carousel.elements)
        return CarouselMessage(delay=delay_s, data=CarouselData(elements=elements))

    def _element(self, element: cms.Element, owner: str) -> CarouselElementData:
        return CarouselElementData(
            img=element.img_url,
            title=self._str(element.title),
            subtitle=self._str(element.subtitle),
            buttons=self._convert_buttons(element.buttons, ButtonStyle.BUTTON, owner),
        )

    def _render_image(self, image: cms.Image, delay_s: float) -> ImageMessage:
        return ImageMessage(delay=delay_s, data=ImageData(image=image.img_url))

    def _render_start_up(self, start_up: cms.StartUp, delay_s: float) -> list[ChannelMessage]:
        img = ImageMessage(delay=delay_s, data=ImageData(image=start_up.img_url))
        text = TextMessage(
            data=TextData(text=self._str(start_up.text)),
            buttons=self._convert_buttons(start_up.buttons, ButtonStyle.BUTTON, start_up.name),
        )
        return [img, text]

    # -- buttons -----------------------------------------------------------

    def _convert_buttons(
        self,
        buttons: Sequence[cms.Button],
        style: ButtonStyle,
        owner: str,
    ) -> tuple[MessageButton, ...] | tuple[QuickReply, ...]:
        limit = self.options.max_buttons if style == ButtonStyle.BUTTON else self.options.max_quick_replies
        if len(buttons) > limit:
            logger.warning(
                "Content %s has %d buttons but %s style allows %d. Trimming",
                owner, len(buttons), style, limit,
            )
            buttons = buttons[:limit]
        if style == ButtonStyle.BUTTON:
            return tuple(
                MessageButton(title=self._str(b.text), payload=b.callback.payload, url=b.callback.url)
                for b in buttons
            )
        return tuple(
            QuickReply(text=self._str(b.text), payload=b.callback.payload, url=b.callback.url)
            for b in buttons
        )

    # -- follow-ups --------------------------------------------------------

    def _append_follow_up(
        self,
        msgs: ChannelMessages,
        content: cms.TopContent,
        chain: _Chain,
    ) -> ChannelMessages:
        follow_up = content.common.follow_up
        if follow_up is None:
            return msgs

        kind = getattr(follow_up, "kind", None)
        if kind not in self._kinds:
            raise UnknownFollowUpError(
                f"Unexpected follow-up type {type(follow_up).__name__} in {content.name}",
                content_name=content.name,
            )
        if follow_up.name in chain:
            raise FollowUpCycleError((*chain, follow_up.name))
        if len(chain) > self.options.max_follow_up_depth:
            raise FollowUpDepthError((*chain, follow_up.name), self.options.max_follow_up_depth)

        _, delay_s = self._kinds[kind]
        follow_ups = self._render(follow_up, delay_s, chain)
        head = list(msgs) if isinstance(msgs, list) else [msgs]
        tail = follow_ups if isinstance(follow_ups, list) else [follow_ups]
        return head + tail

    def _str(self, value: str | None) -> str | None:
        if self.options.replace_empty_strings_with is None:
            return value
        return value or self.options.replace_empty_strings_with


_converter: MessageConverter | None = None


def get_default_converter() -> MessageConverter:
    """Process-wide converter configured from :data:`settings.cfg`."""
    global _converter
    if _converter is None:
        _converter = MessageConverter(settings.cfg.render_options())
    return _converter


def _reset_converter() -> None:
    global _converter
    _converter = None


register_singleton("converter", _reset_converter)
