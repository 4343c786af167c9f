"""Shared pytest fixtures for app.cms tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from app.cms.callback import Callback, ContentCallback, ContentType
from app.cms.contents import Button


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for key in list(os.environ):
        if key.startswith("CHATCMS_"):
            monkeypatch.delenv(key)
    env_path = tmp_path / ".env"
    monkeypatch.setenv("DOTENV_PATH", str(env_path))
    return env_path


@pytest.fixture(autouse=True)
def _reset_singletons(_isolate_env: Path):
    from app.cms.util.singletons import reset_all_singletons

    reset_all_singletons()
    yield
    reset_all_singletons()


@pytest.fixture()
def env_path(_isolate_env: Path) -> Path:
    return _isolate_env


@pytest.fixture()
def make_buttons():
    def _make(count: int, prefix: str = "B") -> tuple[Button, ...]:
        return tuple(
            Button(name=f"{prefix}{i}", text=f"Option {i}", callback=Callback(payload=f"p{i}"))
            for i in range(1, count + 1)
        )

    return _make


@pytest.fixture()
def content_callback() -> ContentCallback:
    return ContentCallback(model=ContentType.TEXT, id="PRE_FAQ1")
