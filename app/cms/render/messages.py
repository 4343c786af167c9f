"""Channel-agnostic message envelopes produced by the converter.

Each envelope has a ``type`` discriminant, a ``delay`` in seconds and a
``data`` payload whose shape is fixed by the type. A conversion returns
either one envelope or a flat list of them.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    model_serializer,
    model_validator,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# -- buttons ---------------------------------------------------------------


class MessageButton(_Frozen):
    """A persistent button, labelled with ``title``."""

    title: str | None = None
    payload: str | None = None
    url: str | None = None


class QuickReply(_Frozen):
    """An inline suggested reply, labelled with ``text``."""

    text: str | None = None
    payload: str | None = None
    url: str | None = None


# -- payloads --------------------------------------------------------------


class TextData(_Frozen):
    text: str | None = None


class ImageData(_Frozen):
    image: str | None = None


class CarouselElementData(_Frozen):
    img: str | None = None
    title: str | None = None
    subtitle: str | None = None
    buttons: tuple[MessageButton, ...] = ()


class CarouselData(_Frozen):
    elements: tuple[CarouselElementData, ...] = ()


# -- envelopes -------------------------------------------------------------


class _Envelope(_Frozen):
    delay: float = Field(default=0.0, ge=0)


class TextMessage(_Envelope):
    """Text with either persistent ``buttons`` or inline ``replies``.

    The attachment which is not used is left out of every dump, so a quick
    reply message never exposes a ``buttons`` key and vice versa.
    """

    type: Literal["text"] = "text"
    data: TextData
    buttons: tuple[MessageButton, ...] | None = None
    replies: tuple[QuickReply, ...] | None = None

    @model_validator(mode="after")
    def _buttons_or_replies(self) -> TextMessage:
        if self.buttons is not None and self.replies is not None:
            raise ValueError("A text message carries either buttons or replies, not both")
        return self

    @model_serializer(mode="wrap")
    def _drop_unused_attachment(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        dumped = handler(self)
        if self.buttons is None:
            dumped.pop("buttons", None)
        if self.replies is None:
            dumped.pop("replies", None)
        return dumped


class ImageMessage(_Envelope):
    type: Literal["image"] = "image"
    data: ImageData


class CarouselMessage(_Envelope):
    type: Literal["carousel"] = "carousel"
    data: CarouselData


ChannelMessage = Annotated[
    Union[TextMessage, ImageMessage, CarouselMessage],
    Field(discriminator="type"),
]
ChannelMessages = Union[TextMessage, ImageMessage, CarouselMessage, list[ChannelMessage]]

_message_adapter: TypeAdapter[ChannelMessage] = TypeAdapter(ChannelMessage)


def parse_message(raw: dict[str, Any]) -> TextMessage | ImageMessage | CarouselMessage:
    """Validate a plain dict into the envelope class named by its ``type``."""
    return _message_adapter.validate_python(raw)


def as_message_list(msgs: ChannelMessages) -> list[ChannelMessage]:
    if isinstance(msgs, list):
        return list(msgs)
    return [msgs]


def messages_to_dicts(msgs: ChannelMessages) -> dict[str, Any] | list[dict[str, Any]]:
    """Dump messages for a channel adapter, omitting unset fields.

    Keeps the list-or-scalar shape of the input.
    """
    if isinstance(msgs, list):
        return [m.model_dump(mode="json", exclude_none=True) for m in msgs]
    return msgs.model_dump(mode="json", exclude_none=True)
