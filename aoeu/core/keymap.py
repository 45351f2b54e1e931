"""QWERTY to Dvorak remapping and the on-screen keyboard layout."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class KeyCode(str, Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press; ``char`` is set only for ``KeyCode.CHAR``."""

    code: KeyCode
    char: Optional[str] = None

    @classmethod
    def of(cls, char: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, char)


class Key(Enum):
    """Physical keys of the Dvorak keyboard, named after their legend."""

    BACK_TICK = "back_tick"
    ONE = "one"
    TWO = "two"
    THREE = "three"
    FOUR = "four"
    FIVE = "five"
    SIX = "six"
    SEVEN = "seven"
    EIGHT = "eight"
    NINE = "nine"
    ZERO = "zero"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    QUOTE = "quote"
    COMMA = "comma"
    PERIOD = "period"
    P = "p"
    Y = "y"
    F = "f"
    G = "g"
    C = "c"
    R = "r"
    L = "l"
    FORWARD_SLASH = "forward_slash"
    EQUAL = "equal"
    BACK_SLASH = "back_slash"
    A = "a"
    O = "o"
    E = "e"
    U = "u"
    I = "i"
    D = "d"
    H = "h"
    T = "t"
    N = "n"
    S = "s"
    DASH = "dash"
    SEMICOLON = "semicolon"
    Q = "q"
    J = "j"
    K = "k"
    X = "x"
    B = "b"
    M = "m"
    W = "w"
    V = "v"
    Z = "z"


# Legend printed on each key: unshifted character followed by the shifted one.
KEY_GLYPHS: Dict[Key, str] = {
    Key.BACK_TICK: "`~",
    Key.ONE: "1!",
    Key.TWO: "2@",
    Key.THREE: "3#",
    Key.FOUR: "4$",
    Key.FIVE: "5%",
    Key.SIX: "6^",
    Key.SEVEN: "7&",
    Key.EIGHT: "8*",
    Key.NINE: "9(",
    Key.ZERO: "0)",
    Key.OPEN_BRACKET: "[{",
    Key.CLOSE_BRACKET: "]}",
    Key.QUOTE: "'\"",
    Key.COMMA: ",<",
    Key.PERIOD: ".>",
    Key.P: "pP",
    Key.Y: "yY",
    Key.F: "fF",
    Key.G: "gG",
    Key.C: "cC",
    Key.R: "rR",
    Key.L: "lL",
    Key.FORWARD_SLASH: "/?",
    Key.EQUAL: "=+",
    Key.BACK_SLASH: "\\|",
    Key.A: "aA",
    Key.O: "oO",
    Key.E: "eE",
    Key.U: "uU",
    Key.I: "iI",
    Key.D: "dD",
    Key.H: "hH",
    Key.T: "tT",
    Key.N: "nN",
    Key.S: "sS",
    Key.DASH: "-_",
    Key.SEMICOLON: ";:",
    Key.Q: "qQ",
    Key.J: "jJ",
    Key.K: "kK",
    Key.X: "xX",
    Key.B: "bB",
    Key.M: "mM",
    Key.W: "wW",
    Key.V: "vV",
    Key.Z: "zZ",
}

_ROW_SIZES = (13, 13, 11, 10)


def _split_rows(keys: Tuple[Key, ...]) -> Tuple[Tuple[Key, ...], ...]:
    rows = []
    start = 0
    for size in _ROW_SIZES:
        rows.append(keys[start:start + size])
        start += size
    return tuple(rows)


# Enum definition order is the physical order, left to right, top to bottom.
KEYBOARD_ROWS: Tuple[Tuple[Key, ...], ...] = _split_rows(tuple(Key))

# Printed characters of both layouts, physical key by physical key.
_QWERTY = (
    "`1234567890-=" "qwertyuiop[]\\" "asdfghjkl;'" "zxcvbnm,./"
    "~!@#$%^&*()_+" "QWERTYUIOP{}|" "ASDFGHJKL:\"" "ZXCVBNM<>?"
)
_DVORAK = (
    "`1234567890[]" "',.pyfgcrl/=\\" "aoeuidhtns-" ";qjkxbmwvz"
    "~!@#$%^&*(){}" "\"<>PYFGCRL?+|" "AOEUIDHTNS_" ":QJKXBMWVZ"
)


def _build_char_keys() -> Dict[str, Key]:
    if set(KEY_GLYPHS) != set(Key):
        missing = sorted(key.name for key in set(Key) - set(KEY_GLYPHS))
        raise ValueError(f"keys without a glyph: {missing}")
    char_keys: Dict[str, Key] = {}
    for key, glyph in KEY_GLYPHS.items():
        for char in glyph:
            if char in char_keys:
                raise ValueError(f"{char!r} is printed on both {char_keys[char].name} and {key.name}")
            char_keys[char] = key
    return char_keys


def _build_remap(source: str, target: str) -> Dict[str, str]:
    if len(source) != len(target):
        raise ValueError("layout strings differ in length")
    table = dict(zip(source, target))
    if len(table) != len(source) or set(table.values()) != set(table):
        raise ValueError("layout table is not a bijection")
    return table


_CHAR_KEYS = _build_char_keys()

QWERTY_TO_DVORAK: Mapping[str, str] = _build_remap(_QWERTY, _DVORAK)

if set(QWERTY_TO_DVORAK) != set(_CHAR_KEYS):
    raise ValueError("layout table does not cover every key exactly once")


def key_for_char(char: str) -> Optional[Key]:
    """Return the display key that prints ``char`` in either shift state."""
    return _CHAR_KEYS.get(char)


def key_glyph(key: Key) -> str:
    return KEY_GLYPHS[key]


class KeyRemapper:
    """Translate key events typed on one layout into another layout's characters.

    Characters missing from the table (space, accented letters) pass through
    unchanged, as do non-character events.
    """

    def __init__(self, table: Mapping[str, str]) -> None:
        self._table = dict(table)

    @classmethod
    def qwerty_to_dvorak(cls) -> "KeyRemapper":
        return cls(QWERTY_TO_DVORAK)

    @classmethod
    def identity(cls) -> "KeyRemapper":
        return cls({})

    def char(self, char: str) -> str:
        return self._table.get(char, char)

    def event(self, event: KeyEvent) -> KeyEvent:
        if event.code is not KeyCode.CHAR or event.char is None:
            return event
        return replace(event, char=self.char(event.char))
