"""Tests for button callbacks."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.cms.callback import Callback, ContentCallback, ContentType


class TestCallback:
    def test_defaults(self) -> None:
        cb = Callback()
        assert cb.payload is None
        assert cb.url is None

    def test_payload_and_url(self) -> None:
        cb = Callback(payload="HELP", url="https://example.com")
        assert cb.payload == "HELP"
        assert cb.url == "https://example.com"

    def test_frozen(self) -> None:
        cb = Callback(payload="HELP")
        with pytest.raises(ValidationError):
            cb.payload = "OTHER"  # type: ignore[misc]


class TestContentCallback:
    def test_payload_derived(self) -> None:
        cb = ContentCallback(model=ContentType.TEXT, id="PRE_FAQ1")
        assert cb.payload == "text$PRE_FAQ1"
        assert cb.url is None

    def test_model_from_string(self) -> None:
        cb = ContentCallback(model="startUp", id="WELCOME")
        assert cb.model is ContentType.STARTUP
        assert cb.payload == "startUp$WELCOME"

    def test_explicit_payload_kept(self) -> None:
        cb = ContentCallback(model=ContentType.CAROUSEL, id="C1", payload="custom")
        assert cb.payload == "custom"

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContentCallback(model=ContentType.TEXT, id="")

    def test_from_payload(self) -> None:
        cb = ContentCallback.from_payload("carousel$PRODUCTS")
        assert cb.model is ContentType.CAROUSEL
        assert cb.id == "PRODUCTS"
        assert cb.payload == "carousel$PRODUCTS"

    def test_from_payload_id_with_separator(self) -> None:
        cb = ContentCallback.from_payload("text$A$B")
        assert cb.id == "A$B"

    @pytest.mark.parametrize("payload", ["PRE_FAQ1", "text$", "$PRE_FAQ1"])
    def test_from_payload_malformed(self, payload: str) -> None:
        with pytest.raises(ValueError):
            ContentCallback.from_payload(payload)

    def test_from_payload_unknown_model(self) -> None:
        with pytest.raises(ValueError, match="unknown content model"):
            ContentCallback.from_payload("queue$SUPPORT")
