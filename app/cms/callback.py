"""Actions triggered when a user taps a button."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

PAYLOAD_SEPARATOR = "$"


class ContentType(StrEnum):
    CAROUSEL = "carousel"
    TEXT = "text"
    URL = "url"
    IMAGE = "image"
    STARTUP = "startUp"


class Callback(BaseModel):
    """Postback payload and/or navigation url of a button."""

    model_config = ConfigDict(frozen=True)

    payload: str | None = None
    url: str | None = None


class ContentCallback(Callback):
    """Callback which displays another CMS content when triggered.

    The payload is derived from the target, eg. ``text$PRE_FAQ1``, so the
    bot can find which content to render when the postback comes back.
    """

    model: ContentType
    id: str = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _derive_payload(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("payload"):
            model = data.get("model")
            if model is not None and data.get("id"):
                data = {**data, "payload": f"{ContentType(model)}{PAYLOAD_SEPARATOR}{data['id']}"}
        return data

    @classmethod
    def from_payload(cls, payload: str) -> ContentCallback:
        model, sep, content_id = payload.partition(PAYLOAD_SEPARATOR)
        if not sep or not content_id:
            raise ValueError(f"Payload {payload!r} does not reference a content")
        try:
            content_type = ContentType(model)
        except ValueError:
            raise ValueError(f"Payload {payload!r} has unknown content model {model!r}") from None
        return cls(model=content_type, id=content_id)
