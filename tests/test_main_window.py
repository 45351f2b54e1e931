"""Tests for aoeu.ui.main_window – Qt key translation and results cards."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt  # noqa: E402

from aoeu.core import results  # noqa: E402
from aoeu.core.keymap import KeyCode, KeyEvent  # noqa: E402
from aoeu.core.session import WordSession  # noqa: E402
from aoeu.ui.main_window import stat_values, translate_key  # noqa: E402


class TestTranslateKey:
    def test_escape(self):
        assert translate_key(Qt.Key.Key_Escape, "\x1b") == KeyEvent(KeyCode.ESCAPE)

    def test_backspace(self):
        assert translate_key(Qt.Key.Key_Backspace, "\x08") == KeyEvent(KeyCode.BACKSPACE)

    @pytest.mark.parametrize("key", [Qt.Key.Key_Return, Qt.Key.Key_Enter])
    def test_enter(self, key):
        assert translate_key(key, "\r") == KeyEvent(KeyCode.ENTER)

    def test_printable_char(self):
        assert translate_key(Qt.Key.Key_S, "s") == KeyEvent.of("s")

    def test_space(self):
        assert translate_key(Qt.Key.Key_Space, " ") == KeyEvent.of(" ")

    def test_modifier_only(self):
        assert translate_key(Qt.Key.Key_Shift, "") == KeyEvent(KeyCode.OTHER)

    def test_multi_char_text_ignored(self):
        assert translate_key(Qt.Key.Key_unknown, "ab") == KeyEvent(KeyCode.OTHER)


# ===========================================================================
# Results cards
# ===========================================================================

class TestStatValues:
    def test_every_card_filled_from_summary(self):
        w = WordSession("ab")
        w.add_char("a", 1.0)
        w.add_char("x", 1.0)
        w.remove_char()
        w.add_char("b", 1.0)
        lesson_results = results.TestResults([w.finalise(" ", 1.0)])

        values = stat_values(lesson_results.summary())
        assert values == {
            "wpm": "9",
            "typos": "1",
            "accuracy": "67%",
            "words": "1",
            "chars": "3",
            "seconds": "4.0",
        }

    def test_empty_lesson(self):
        values = stat_values(results.TestResults().summary())
        assert values["wpm"] == "0"
        assert values["accuracy"] == "0%"
        assert values["seconds"] == "0.0"
