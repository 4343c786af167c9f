"""Tests for settings, the .env reader and the singleton registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.cms.config import settings
from app.cms.config.settings import Settings
from app.cms.render.options import RenderOptions
from app.cms.util.env_file import EnvFile
from app.cms.util.singletons import register_singleton, registered_singletons, reset_all_singletons


class TestEnvFile:
    def test_missing_file(self, tmp_path: Path) -> None:
        env = EnvFile(tmp_path / "missing.env")
        assert env.read("ANY") == ""
        assert env.keys() == []

    def test_read(self, tmp_path: Path) -> None:
        path = tmp_path / ".env"
        path.write_text('CHATCMS_MAX_BUTTONS=2\nQUOTED="with spaces"\n# comment\n')
        env = EnvFile(path)
        assert env.read("CHATCMS_MAX_BUTTONS") == "2"
        assert env.read("QUOTED") == "with spaces"

    def test_load_refreshes(self, tmp_path: Path) -> None:
        path = tmp_path / ".env"
        env = EnvFile(path)
        path.write_text("KEY=value\n")
        assert env.read("KEY") == ""
        env.load()
        assert env.read("KEY") == "value"


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.render_options() == RenderOptions()

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHATCMS_FOLLOW_UP_DELAY_SECONDS", "2.5")
        monkeypatch.setenv("CHATCMS_MAX_QUICK_REPLIES", "11")
        monkeypatch.setenv("CHATCMS_REPLACE_EMPTY_STRINGS_WITH", "N/A")
        options = Settings().render_options()
        assert options.follow_up_delay_seconds == 2.5
        assert options.max_quick_replies == 11
        assert options.replace_empty_strings_with == "N/A"

    def test_env_file_wins(self, env_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHATCMS_MAX_BUTTONS", "4")
        env_path.write_text("CHATCMS_MAX_BUTTONS=1\n")
        assert Settings().max_buttons == 1

    def test_reload(self, env_path: Path) -> None:
        s = Settings()
        env_path.write_text("CHATCMS_MAX_FOLLOW_UP_DEPTH=2\n")
        assert s.max_follow_up_depth == 10
        s.reload()
        assert s.max_follow_up_depth == 2

    def test_empty_substitution_means_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHATCMS_REPLACE_EMPTY_STRINGS_WITH", "")
        assert Settings().replace_empty_strings_with is None

    def test_invalid_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with monkeypatch.context() as m:
            m.setenv("CHATCMS_MAX_BUTTONS", "three")
            with pytest.raises(ValueError, match="CHATCMS_MAX_BUTTONS"):
                Settings()
        # Singletons rebuilt after the test must not see the bad value
        reset_all_singletons()
        assert settings.cfg.max_buttons == 3

    def test_negative_rejected_by_options(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHATCMS_MAX_BUTTONS", "-1")
        with pytest.raises(ValueError):
            Settings().render_options()


class TestSingletons:
    def test_cfg_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        before = settings.cfg
        monkeypatch.setenv("CHATCMS_MAX_BUTTONS", "6")
        reset_all_singletons()
        assert settings.cfg is not before
        assert settings.cfg.max_buttons == 6

    def test_registered(self) -> None:
        names = registered_singletons()
        assert "settings" in names
        assert "converter" in names

    def test_register_replaces(self) -> None:
        calls: list[str] = []
        register_singleton("test-only", lambda: calls.append("first"))
        register_singleton("test-only", lambda: calls.append("second"))
        reset_all_singletons()
        assert calls == ["second"]
