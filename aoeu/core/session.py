from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from aoeu.core.errors import IncompleteWordError, WordFinishedError
from aoeu.core.metrics import Delimiter, Match, Metric, Typo

SPACE_GLYPH = "␣"


class WordState(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    FINISHED = "finished"


class CharState(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNTYPED = "untyped"


@dataclass(frozen=True)
class Segment:
    """One displayed character of the current word."""

    char: str
    state: CharState


@dataclass(frozen=True)
class FinishedWord:
    """A confirmed word and the keystrokes that produced it."""

    value: str
    metrics: Tuple[Metric, ...]

    def __len__(self) -> int:
        return len(self.value)

    @property
    def len_inc_delim(self) -> int:
        """Length counting the delimiter that confirmed the word."""
        return len(self.value) + 1

    @property
    def duration(self) -> float:
        return sum(metric.duration for metric in self.metrics)


class WordSession:
    """Tracks typing progress on a single target word.

    Every keystroke that lands inside the target is classified as a
    :class:`Match` or a :class:`Typo` and appended to the metric log.
    Keystrokes past the end of the target are kept in the typed buffer so the
    learner has to delete them, but they are not scored.

    The log is append-only: :meth:`remove_char` moves the typed cursor back
    without retracting the metric that keystroke produced.
    """

    def __init__(self, value: str) -> None:
        self._value = value
        self._typed: List[str] = []
        self._metrics: List[Metric] = []
        self._finished = False

    @property
    def value(self) -> str:
        """The target word."""
        return self._value

    @property
    def typed(self) -> str:
        return "".join(self._typed)

    @property
    def metrics(self) -> Tuple[Metric, ...]:
        return tuple(self._metrics)

    @property
    def overflow(self) -> int:
        """Characters typed beyond the end of the target."""
        return max(0, len(self._typed) - len(self._value))

    @property
    def state(self) -> WordState:
        if self._finished:
            return WordState.FINISHED
        if self.is_complete():
            return WordState.COMPLETE
        return WordState.IN_PROGRESS

    def char_at(self, index: int) -> str | None:
        if 0 <= index < len(self._value):
            return self._value[index]
        return None

    def add_char(self, char: str, duration: float) -> None:
        """Type ``char``, ``duration`` seconds after the previous keystroke."""
        self._ensure_open()
        expected = self.char_at(len(self._typed))
        if expected is not None:
            if char == expected:
                self._metrics.append(Match(char=char, duration=duration))
            else:
                self._metrics.append(Typo(typed=char, expected=expected, duration=duration))
        self._typed.append(char)

    def remove_char(self) -> None:
        self._ensure_open()
        if self._typed:
            self._typed.pop()

    def is_complete(self) -> bool:
        return not self._finished and self.typed == self._value

    def finalise(self, delimiter: str, duration: float) -> FinishedWord:
        """Confirm the completed word with ``delimiter`` and freeze its metrics."""
        self._ensure_open()
        if not self.is_complete():
            raise IncompleteWordError(
                f"cannot finalise {self._value!r}: typed text is {self.typed!r}"
            )
        self._metrics.append(Delimiter(char=delimiter, duration=duration))
        self._typed = []
        self._finished = True
        return FinishedWord(value=self._value, metrics=tuple(self._metrics))

    def segments(self) -> List[Segment]:
        """Classify each displayed position as correct, incorrect or untyped."""
        segments: List[Segment] = []
        for index, typed in enumerate(self._typed):
            expected = self.char_at(index)
            state = CharState.CORRECT if typed == expected else CharState.INCORRECT
            segments.append(Segment(SPACE_GLYPH if typed == " " else typed, state))
        for char in self._value[len(self._typed):]:
            segments.append(Segment(char, CharState.UNTYPED))
        return segments

    def _ensure_open(self) -> None:
        if self._finished:
            raise WordFinishedError(f"{self._value!r} has already been finalised")
