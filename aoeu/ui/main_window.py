from __future__ import annotations

import logging
from typing import Callable, Dict, Sequence

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import (
    QApplication,
    QGridLayout,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from aoeu.core.errors import SamplingExhausted, TutorError
from aoeu.core.keymap import KeyCode, KeyEvent
from aoeu.core.lessons import Lesson
from aoeu.core.results import ResultsSummary
from aoeu.core.runner import LessonReport, LessonRunner, Phase, TypingView
from aoeu.ui.colors import TutorColors
from aoeu.ui.typing_widgets import KeyboardWidget, SparklineWidget, StatCard, WordLineWidget

logger = logging.getLogger(__name__)


def translate_key(key: int, text: str) -> KeyEvent:
    """Turn a Qt key press into the runner's KeyEvent."""
    if key == Qt.Key.Key_Escape:
        return KeyEvent(KeyCode.ESCAPE)
    if key == Qt.Key.Key_Backspace:
        return KeyEvent(KeyCode.BACKSPACE)
    if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
        return KeyEvent(KeyCode.ENTER)
    if len(text) == 1 and text.isprintable():
        return KeyEvent.of(text)
    return KeyEvent(KeyCode.OTHER)


def stat_values(summary: ResultsSummary) -> Dict[str, str]:
    """Card texts for the results page, keyed by card name."""
    return {
        "wpm": f"{summary.wpm:.0f}",
        "typos": str(summary.typos),
        "accuracy": f"{summary.accuracy:.0f}%",
        "words": str(summary.words),
        "chars": str(summary.chars),
        "seconds": f"{summary.duration_secs:.1f}",
    }


class MainWindow(QMainWindow):
    """Typing screen and results screen; renders whatever the runner reports.

    Key presses go straight to :meth:`LessonRunner.feed`, so the Qt event loop
    is the input source.
    """

    def __init__(self, runner_factory: Callable[["MainWindow"], LessonRunner]) -> None:
        super().__init__()
        self.setWindowTitle("aoeu - Dvorak typing tutor")
        self.setStyleSheet(
            f"""
            QMainWindow {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {TutorColors.BG_TOP}, stop:1 {TutorColors.BG_BOTTOM});
            }}
            """
        )
        self._word_total = 0
        self._build_ui()
        self._runner: LessonRunner = runner_factory(self)

    @property
    def done(self) -> bool:
        return self._runner.phase is Phase.DONE

    def start(self) -> None:
        self._runner.start()

    def _build_ui(self) -> None:
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        typing_page = QWidget()
        typing_layout = QVBoxLayout(typing_page)
        typing_layout.setContentsMargins(32, 24, 32, 24)
        typing_layout.setSpacing(18)
        self.lesson_label = QLabel()
        self.lesson_label.setStyleSheet(
            f"color: {TutorColors.PRIMARY_DARK}; font-size: 22px; font-weight: 800;"
        )
        self.alphabet_label = QLabel()
        self.alphabet_label.setStyleSheet(f"color: {TutorColors.TEXT_SECONDARY}; font-size: 14px;")
        self.word_line = WordLineWidget()
        self.word_line.setStyleSheet(f"background: {TutorColors.CARD_BG}; border-radius: 16px;")
        self.progress_label = QLabel()
        self.progress_label.setStyleSheet(f"color: {TutorColors.TEXT_MUTED}; font-size: 12px;")
        self.keyboard = KeyboardWidget()
        typing_layout.addWidget(self.lesson_label)
        typing_layout.addWidget(self.alphabet_label)
        typing_layout.addWidget(self.word_line)
        typing_layout.addWidget(self.progress_label)
        typing_layout.addWidget(self.keyboard, 1)
        self._typing_page = typing_page
        self._stack.addWidget(typing_page)

        results_page = QWidget()
        results_layout = QVBoxLayout(results_page)
        results_layout.setContentsMargins(32, 24, 32, 24)
        results_layout.setSpacing(18)
        self.results_title = QLabel()
        self.results_title.setStyleSheet(
            f"color: {TutorColors.PRIMARY_DARK}; font-size: 22px; font-weight: 800;"
        )
        results_layout.addWidget(self.results_title)

        grid = QGridLayout()
        grid.setSpacing(14)
        self.wpm_card = StatCard("wpm", TutorColors.PRIMARY)
        self.typos_card = StatCard("typos", TutorColors.CORAL)
        self.accuracy_card = StatCard("accuracy", TutorColors.PRIMARY_DARK)
        self.words_card = StatCard("words typed", TutorColors.LAVENDER)
        self.chars_card = StatCard("characters typed", TutorColors.AMBER)
        self.seconds_card = StatCard("total seconds", TutorColors.PRIMARY_LIGHT)
        self._cards = {
            "wpm": self.wpm_card,
            "typos": self.typos_card,
            "accuracy": self.accuracy_card,
            "words": self.words_card,
            "chars": self.chars_card,
            "seconds": self.seconds_card,
        }
        grid.addWidget(self.wpm_card, 0, 0, 1, 2)
        grid.addWidget(self.typos_card, 0, 2, 1, 2)
        grid.addWidget(self.accuracy_card, 0, 4, 1, 2)
        grid.addWidget(self.words_card, 1, 0, 1, 2)
        grid.addWidget(self.chars_card, 1, 2, 1, 2)
        grid.addWidget(self.seconds_card, 1, 4, 1, 2)
        results_layout.addLayout(grid)

        spark_title = QLabel("word times (normalised)")
        spark_title.setStyleSheet(f"color: {TutorColors.TEXT_SECONDARY}; font-size: 13px;")
        results_layout.addWidget(spark_title)
        self.sparkline = SparklineWidget()
        results_layout.addWidget(self.sparkline, 1)

        self.results_hint = QLabel("Enter: next lesson    Esc: quit")
        self.results_hint.setAlignment(Qt.AlignCenter)
        self.results_hint.setStyleSheet(f"color: {TutorColors.TEXT_MUTED}; font-size: 13px;")
        results_layout.addWidget(self.results_hint)
        self._results_page = results_page
        self._stack.addWidget(results_page)

    # -- RenderSink ----------------------------------------------------------

    def lesson_started(self, lesson: Lesson, words: Sequence[str]) -> None:
        self.lesson_label.setText(lesson.title)
        self.alphabet_label.setText(f"Letters: {lesson.letters}")
        self._word_total = len(words)
        self.keyboard.set_pressed(None)
        self._stack.setCurrentWidget(self._typing_page)

    def progress(self, view: TypingView) -> None:
        self.word_line.set_content(view.finished, view.segments, view.remaining)
        self.keyboard.set_pressed(view.pressed_key)
        text = f"Word {len(view.finished) + 1} of {self._word_total}"
        if view.overflow:
            text += f"    {view.overflow} extra"
        self.progress_label.setText(text)

    def lesson_finished(self, report: LessonReport) -> None:
        results = report.results
        suffix = " (stopped early)" if report.cancelled else ""
        self.results_title.setText(f"{report.lesson.title}{suffix}")
        for name, value in stat_values(results.summary()).items():
            self._cards[name].set_value(value)
        self.sparkline.set_data(results.normalised_word_durations())
        self._stack.setCurrentWidget(self._results_page)

    def lesson_skipped(self, lesson: Lesson, error: SamplingExhausted) -> None:
        self.statusBar().showMessage(f"Skipped {lesson.title}: {error}", 8000)

    def run_finished(self, reports: Sequence[LessonReport], aborted: bool) -> None:
        self.close()

    # -- Qt events -----------------------------------------------------------

    def keyPressEvent(self, event: QKeyEvent) -> None:
        try:
            self._runner.feed(translate_key(event.key(), event.text()))
        except TutorError:
            logger.exception("Typing test failed")
            QApplication.exit(1)

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing after %d lessons", len(self._runner.reports))
        super().closeEvent(event)
