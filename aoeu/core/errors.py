"""Exceptions raised by the typing-test core."""

from __future__ import annotations

from typing import Iterable


class TutorError(Exception):
    """Base class for all tutor errors."""


class InputSourceError(TutorError):
    """Reading the next key event from the input source failed."""


class ClockError(TutorError):
    """The clock produced a reading earlier than the previous one."""


class SamplingExhausted(TutorError):
    """No corpus word satisfies the lesson alphabet."""

    def __init__(self, allowed: Iterable[str], requested: int) -> None:
        self.allowed = frozenset(allowed)
        self.requested = requested
        alphabet = "".join(sorted(self.allowed))
        super().__init__(
            f"no word in the corpus uses only {alphabet!r} ({requested} requested)"
        )


class IncompleteWordError(TutorError):
    """A word was finalised before its typed text matched the target."""


class WordFinishedError(TutorError):
    """A word was modified after it had been finalised."""
