from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, List, Optional, Protocol, Sequence, Tuple

from aoeu.core.clock import Clock
from aoeu.core.errors import ClockError, InputSourceError, SamplingExhausted
from aoeu.core.keymap import Key, KeyCode, KeyEvent, KeyRemapper, key_for_char
from aoeu.core.lessons import Lesson
from aoeu.core.results import TestResults
from aoeu.core.sampler import WordSampler
from aoeu.core.session import FinishedWord, Segment, WordSession

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    TYPING = "typing"
    RESULTS = "results"
    DONE = "done"


@dataclass(frozen=True)
class TypingView:
    """View model of the typing screen (pure data)."""

    lesson: Lesson
    finished: Tuple[str, ...]
    segments: Tuple[Segment, ...]
    remaining: Tuple[str, ...]
    pressed_key: Optional[Key]
    overflow: int


@dataclass(frozen=True)
class LessonReport:
    lesson: Lesson
    results: TestResults
    cancelled: bool = False


class InputSource(Protocol):
    def read_event(self) -> KeyEvent:
        """Block until the next key press and return it."""
        ...


class RenderSink(Protocol):
    def lesson_started(self, lesson: Lesson, words: Sequence[str]) -> None:
        ...

    def progress(self, view: TypingView) -> None:
        ...

    def lesson_finished(self, report: LessonReport) -> None:
        ...

    def lesson_skipped(self, lesson: Lesson, error: SamplingExhausted) -> None:
        ...

    def run_finished(self, reports: Sequence[LessonReport], aborted: bool) -> None:
        ...


class LessonRunner:
    """Drives the learner through the lessons: typing -> results -> next lesson.

    - Push driven: the UI calls :meth:`feed` for every key press; :meth:`run`
      wraps the same logic in a blocking read loop.
    - Time is entirely via the injected Clock. Each keystroke is timed from
      the previous character or delimiter; backspaces do not restart the timer.
    - Escape while typing ends the lesson with the words finished so far.
      Escape on the results screen ends the run, Enter moves on.
    """

    def __init__(
        self,
        lessons: Sequence[Lesson],
        sampler: WordSampler,
        *,
        clock: Clock,
        sink: RenderSink,
        remapper: Optional[KeyRemapper] = None,
        words_per_lesson: int = 100,
        delimiter: str = " ",
    ) -> None:
        if words_per_lesson < 1:
            raise ValueError("words_per_lesson must be >= 1")
        self._lessons = list(lessons)
        self._sampler = sampler
        self._clock = clock
        self._sink = sink
        self._remapper = remapper or KeyRemapper.qwerty_to_dvorak()
        self._words_per_lesson = words_per_lesson
        self._delimiter = delimiter

        self._phase = Phase.IDLE
        self._lesson_index = -1
        self._reports: List[LessonReport] = []
        self._queue: Deque[str] = deque()
        self._finished: List[FinishedWord] = []
        self._word: Optional[WordSession] = None
        self._pressed: Optional[Key] = None
        self._mark = 0.0

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def reports(self) -> Tuple[LessonReport, ...]:
        return tuple(self._reports)

    @property
    def current_lesson(self) -> Optional[Lesson]:
        if 0 <= self._lesson_index < len(self._lessons):
            return self._lessons[self._lesson_index]
        return None

    @property
    def current_word(self) -> Optional[WordSession]:
        return self._word

    def start(self) -> None:
        if self._phase is not Phase.IDLE:
            raise RuntimeError("runner has already been started")
        logger.info("Starting run with %d lessons", len(self._lessons))
        self._next_lesson()

    def run(self, source: InputSource) -> List[LessonReport]:
        """Read key presses from ``source`` until the run is over."""
        if self._phase is Phase.IDLE:
            self.start()
        while self._phase is not Phase.DONE:
            self.feed(self._read(source))
        return list(self._reports)

    def feed(self, event: KeyEvent) -> None:
        if self._phase is Phase.TYPING:
            self._feed_typing(self._remapper.event(event))
        elif self._phase is Phase.RESULTS:
            self._feed_results(event)

    # -- typing --------------------------------------------------------------

    def _feed_typing(self, event: KeyEvent) -> None:
        word = self._word
        assert word is not None
        if event.code is KeyCode.ESCAPE:
            logger.info("Lesson %s cancelled with %d words finished", self._lesson_key(), len(self._finished))
            self._end_lesson(cancelled=True)
            return
        if event.code is KeyCode.BACKSPACE:
            word.remove_char()
        elif event.code is KeyCode.CHAR and event.char:
            char = event.char
            self._pressed = key_for_char(char)
            if char == self._delimiter and word.is_complete():
                self._finished.append(word.finalise(char, self._elapsed()))
                if not self._queue:
                    self._end_lesson(cancelled=False)
                    return
                self._word = WordSession(self._queue.popleft())
            else:
                word.add_char(char, self._elapsed())
        else:
            return
        self._sink.progress(self._view())

    def _elapsed(self) -> float:
        now = self._clock.now()
        if now < self._mark:
            raise ClockError(f"clock went backwards from {self._mark:.6f}s to {now:.6f}s")
        elapsed = now - self._mark
        self._mark = now
        return elapsed

    def _view(self) -> TypingView:
        word = self._word
        assert word is not None
        lesson = self._lessons[self._lesson_index]
        return TypingView(
            lesson=lesson,
            finished=tuple(finished.value for finished in self._finished),
            segments=tuple(word.segments()),
            remaining=tuple(self._queue),
            pressed_key=self._pressed,
            overflow=word.overflow,
        )

    # -- lessons -------------------------------------------------------------

    def _next_lesson(self) -> None:
        while True:
            self._lesson_index += 1
            if self._lesson_index >= len(self._lessons):
                self._finish_run(aborted=False)
                return
            lesson = self._lessons[self._lesson_index]
            try:
                words = self._sampler.sample(lesson.alphabet, self._words_per_lesson)
            except SamplingExhausted as e:
                logger.warning("Skipping lesson %s: %s", lesson.key, e)
                self._sink.lesson_skipped(lesson, e)
                continue
            self._begin_lesson(lesson, words)
            return

    def _begin_lesson(self, lesson: Lesson, words: Deque[str]) -> None:
        logger.info("Lesson %s (%s): %d words", lesson.key, lesson.title, len(words))
        self._phase = Phase.TYPING
        self._queue = words
        self._finished = []
        self._pressed = None
        self._sink.lesson_started(lesson, tuple(words))
        self._word = WordSession(self._queue.popleft())
        self._mark = self._clock.now()
        self._sink.progress(self._view())

    def _end_lesson(self, *, cancelled: bool) -> None:
        lesson = self._lessons[self._lesson_index]
        results = TestResults(self._finished)
        report = LessonReport(lesson=lesson, results=results, cancelled=cancelled)
        self._reports.append(report)
        self._word = None
        self._queue = deque()
        self._finished = []
        self._phase = Phase.RESULTS
        logger.info(
            "Lesson %s finished: %.1f wpm, %d typos, %d words in %.1fs",
            lesson.key,
            results.wpm_avg,
            results.typo_cnt,
            results.word_cnt,
            results.duration_secs,
        )
        self._sink.lesson_finished(report)

    def _feed_results(self, event: KeyEvent) -> None:
        if event.code is KeyCode.ESCAPE:
            self._finish_run(aborted=True)
        elif event.code is KeyCode.ENTER:
            self._next_lesson()

    def _finish_run(self, *, aborted: bool) -> None:
        self._phase = Phase.DONE
        logger.info("Run %s after %d lessons", "aborted" if aborted else "complete", len(self._reports))
        self._sink.run_finished(tuple(self._reports), aborted)

    def _read(self, source: InputSource) -> KeyEvent:
        try:
            return source.read_event()
        except (OSError, EOFError) as e:
            raise InputSourceError("reading from the input source failed") from e

    def _lesson_key(self) -> str:
        lesson = self.current_lesson
        return lesson.key if lesson else "-"
