"""Tests for aoeu.core.keymap – QWERTY to Dvorak remapping and key identities."""

from __future__ import annotations

import pytest

from aoeu.core.keymap import (
    KEY_GLYPHS,
    KEYBOARD_ROWS,
    QWERTY_TO_DVORAK,
    Key,
    KeyCode,
    KeyEvent,
    KeyRemapper,
    key_for_char,
    key_glyph,
)


# ===========================================================================
# Layout table
# ===========================================================================

class TestLayoutTable:
    def test_table_is_a_permutation(self):
        assert len(QWERTY_TO_DVORAK) == 94
        assert set(QWERTY_TO_DVORAK.values()) == set(QWERTY_TO_DVORAK)

    def test_every_key_has_a_glyph(self):
        assert set(KEY_GLYPHS) == set(Key)
        assert len(Key) == 47

    def test_rows(self):
        assert [len(row) for row in KEYBOARD_ROWS] == [13, 13, 11, 10]
        assert [key for row in KEYBOARD_ROWS for key in row] == list(Key)

    def test_home_row(self):
        home = "".join(key_glyph(key)[0] for key in KEYBOARD_ROWS[2])
        assert home == "aoeuidhtns-"


# ===========================================================================
# QWERTY -> Dvorak characters
# ===========================================================================

class TestQwertyToDvorak:
    @pytest.mark.parametrize(
        "qwerty, dvorak",
        [
            ("a", "a"),
            ("s", "o"),
            ("d", "e"),
            ("f", "u"),
            ("j", "h"),
            ("k", "t"),
            ("l", "n"),
            (";", "s"),
            ("q", "'"),
            ("w", ","),
            ("e", "."),
            ("z", ";"),
            ("-", "["),
            ("=", "]"),
            ("[", "/"),
            ("]", "="),
            ("'", "-"),
            ("/", "z"),
            ("`", "`"),
            ("1", "1"),
        ],
    )
    def test_unshifted(self, qwerty, dvorak):
        assert KeyRemapper.qwerty_to_dvorak().char(qwerty) == dvorak

    @pytest.mark.parametrize(
        "qwerty, dvorak",
        [("S", "O"), ("Q", '"'), ("W", "<"), ("Z", ":"), (":", "S"), ("_", "{"), ('"', "_"), ("?", "Z")],
    )
    def test_shift_state_preserved(self, qwerty, dvorak):
        assert KeyRemapper.qwerty_to_dvorak().char(qwerty) == dvorak

    @pytest.mark.parametrize("char", [" ", "é", "\t", "ß"])
    def test_unmapped_passes_through(self, char):
        assert KeyRemapper.qwerty_to_dvorak().char(char) == char

    def test_deterministic(self):
        r = KeyRemapper.qwerty_to_dvorak()
        assert all(r.char(c) == r.char(c) == QWERTY_TO_DVORAK[c] for c in QWERTY_TO_DVORAK)

    def test_home_row_positions(self):
        r = KeyRemapper.qwerty_to_dvorak()
        assert "".join(r.char(c) for c in "asdfghjkl;") == "aoeuidhtns"


# ===========================================================================
# KeyRemapper.event
# ===========================================================================

class TestRemapEvent:
    def test_char_event(self):
        r = KeyRemapper.qwerty_to_dvorak()
        assert r.event(KeyEvent.of("s")) == KeyEvent(KeyCode.CHAR, "o")

    @pytest.mark.parametrize("code", [KeyCode.BACKSPACE, KeyCode.ENTER, KeyCode.ESCAPE, KeyCode.OTHER])
    def test_control_events_unchanged(self, code):
        event = KeyEvent(code)
        assert KeyRemapper.qwerty_to_dvorak().event(event) is event

    def test_identity(self):
        r = KeyRemapper.identity()
        assert r.char("s") == "s"
        assert r.event(KeyEvent.of("q")) == KeyEvent.of("q")


# ===========================================================================
# Display keys
# ===========================================================================

class TestKeyForChar:
    def test_both_shift_states(self):
        assert key_for_char("p") is Key.P
        assert key_for_char("P") is Key.P

    def test_punctuation(self):
        assert key_for_char("/") is Key.FORWARD_SLASH
        assert key_for_char("?") is Key.FORWARD_SLASH
        assert key_for_char("|") is Key.BACK_SLASH
        assert key_for_char('"') is Key.QUOTE

    def test_unknown(self):
        assert key_for_char(" ") is None
        assert key_for_char("é") is None

    def test_glyph(self):
        assert key_glyph(Key.DASH) == "-_"
        assert key_glyph(Key.Z) == "zZ"

    def test_every_remapped_char_has_a_key(self):
        assert all(key_for_char(c) is not None for c in QWERTY_TO_DVORAK.values())
