"""Per-keystroke metric events recorded while a word is typed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Delimiter:
    """The keystroke that confirmed a completed word."""

    char: str
    duration: float


@dataclass(frozen=True)
class Match:
    char: str
    duration: float


@dataclass(frozen=True)
class Typo:
    typed: str
    expected: str
    duration: float


# ``duration`` is seconds since the previous keystroke (or since the word began).
Metric = Union[Delimiter, Match, Typo]
