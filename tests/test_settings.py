"""Tests for aoeu.core.settings – optional YAML settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from aoeu.core.settings import TutorSettings, load_settings


@pytest.fixture()
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / "settings.yaml"


class TestDefaults:
    def test_values(self):
        s = TutorSettings()
        assert s.words_per_lesson == 100
        assert s.remap_from_qwerty is True
        assert s.seed is None

    def test_missing_file(self, settings_file: Path):
        assert load_settings(settings_file) == TutorSettings()

    def test_empty_file(self, settings_file: Path):
        settings_file.write_text("", encoding="utf-8")
        assert load_settings(settings_file) == TutorSettings()

    def test_unparsable_file_falls_back(self, settings_file: Path, caplog: pytest.LogCaptureFixture):
        settings_file.write_text("words_per_lesson: [1, 2\n", encoding="utf-8")
        assert load_settings(settings_file) == TutorSettings()
        assert "Could not load settings" in caplog.text


class TestValues:
    def test_all_fields(self, settings_file: Path):
        settings_file.write_text(
            "words_per_lesson: 20\nremap_from_qwerty: false\nseed: 7\n", encoding="utf-8"
        )
        assert load_settings(settings_file) == TutorSettings(
            words_per_lesson=20, remap_from_qwerty=False, seed=7
        )

    def test_partial(self, settings_file: Path):
        settings_file.write_text("words_per_lesson: 5\n", encoding="utf-8")
        s = load_settings(settings_file)
        assert s.words_per_lesson == 5
        assert s.remap_from_qwerty is True

    def test_unknown_keys_warned(self, settings_file: Path, caplog: pytest.LogCaptureFixture):
        settings_file.write_text("colour: blue\n", encoding="utf-8")
        assert load_settings(settings_file) == TutorSettings()
        assert "colour" in caplog.text


class TestInvalid:
    @pytest.mark.parametrize("value", ["0", "-3", "many", "true", "2.5"])
    def test_words_per_lesson(self, settings_file: Path, value: str):
        settings_file.write_text(f"words_per_lesson: {value}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="words_per_lesson"):
            load_settings(settings_file)

    def test_remap_must_be_bool(self, settings_file: Path):
        settings_file.write_text("remap_from_qwerty: sometimes\n", encoding="utf-8")
        with pytest.raises(ValueError, match="remap_from_qwerty"):
            load_settings(settings_file)

    def test_seed_must_be_int(self, settings_file: Path):
        settings_file.write_text("seed: abc\n", encoding="utf-8")
        with pytest.raises(ValueError, match="seed"):
            load_settings(settings_file)

    def test_not_a_mapping(self, settings_file: Path):
        settings_file.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_settings(settings_file)
