"""Rendering of CMS contents into channel messages."""

from .converter import CAROUSEL_FOLLOW_UP_DELAY_SECONDS, MessageConverter, get_default_converter
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
    as_message_list,
    messages_to_dicts,
    parse_message,
)
from .options import RenderOptions

__all__ = [
    "CAROUSEL_FOLLOW_UP_DELAY_SECONDS",
    "CarouselData",
    "CarouselElementData",
    "CarouselMessage",
    "ChannelMessage",
    "ChannelMessages",
    "ImageData",
    "ImageMessage",
    "MessageButton",
    "MessageConverter",
    "QuickReply",
    "RenderOptions",
    "TextData",
    "TextMessage",
    "as_message_list",
    "get_default_converter",
    "messages_to_dicts",
    "parse_message",
]
