from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from aoeu.core.metrics import Match, Typo
from aoeu.core.session import FinishedWord

CHARS_PER_WORD = 5.0


@dataclass(frozen=True)
class ResultsSummary:
    """Headline numbers of one lesson, ready for display."""

    wpm: float
    typos: int
    words: int
    chars: int
    duration_secs: float
    accuracy: float


class TestResults:
    """Statistics over the words finished during one lesson.

    Speed follows the usual convention of five characters per word. The
    delimiter that confirms each word counts as a character, and the duration
    is the sum of every recorded keystroke gap, so time spent thinking before
    the first keystroke of a word is included.
    """

    def __init__(self, words: Iterable[FinishedWord] = ()) -> None:
        self._words: Tuple[FinishedWord, ...] = tuple(words)

    @property
    def words(self) -> Tuple[FinishedWord, ...]:
        return self._words

    @property
    def word_cnt(self) -> int:
        return len(self._words)

    @property
    def char_cnt(self) -> int:
        return sum(word.len_inc_delim for word in self._words)

    @property
    def duration_secs(self) -> float:
        return sum(word.duration for word in self._words)

    @property
    def typo_cnt(self) -> int:
        return sum(
            1 for word in self._words for metric in word.metrics if isinstance(metric, Typo)
        )

    @property
    def wpm_avg(self) -> float:
        duration = self.duration_secs
        if not self._words or duration <= 0:
            return 0.0
        return (self.char_cnt / CHARS_PER_WORD) / (duration / 60.0)

    @property
    def accuracy(self) -> float:
        """Matches as a percentage of all scored keystrokes."""
        matches = sum(
            1 for word in self._words for metric in word.metrics if isinstance(metric, Match)
        )
        scored = matches + self.typo_cnt
        if not scored:
            return 0.0
        return matches / scored * 100.0

    def word_durations(self) -> List[float]:
        return [word.duration for word in self._words]

    def normalised_word_durations(self) -> List[int]:
        """Milliseconds per character of each word, for the sparkline."""
        return [
            round(word.duration / word.len_inc_delim * 1000.0) for word in self._words
        ]

    def summary(self) -> ResultsSummary:
        return ResultsSummary(
            wpm=self.wpm_avg,
            typos=self.typo_cnt,
            words=self.word_cnt,
            chars=self.char_cnt,
            duration_secs=self.duration_secs,
            accuracy=self.accuracy,
        )

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"TestResults(word_cnt={self.word_cnt}, wpm_avg={self.wpm_avg:.1f})"
