"""Application entry point and setup for the aoeu Dvorak typing tutor."""

import logging
import random
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from aoeu.core.clock import MonotonicClock
from aoeu.core.corpus import load_corpus
from aoeu.core.keymap import KeyRemapper
from aoeu.core.lessons import LessonRepository
from aoeu.core.runner import LessonRunner
from aoeu.core.sampler import WordSampler
from aoeu.core.settings import load_settings
from aoeu.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load lessons and words, then hand control to the main window."""
    configure_logging()
    settings = load_settings()
    lessons = LessonRepository()
    sampler = WordSampler(load_corpus(), rng=random.Random(settings.seed))
    remapper = KeyRemapper.qwerty_to_dvorak() if settings.remap_from_qwerty else KeyRemapper.identity()
    logging.info(
        "Remapping %s, %d words per lesson",
        "QWERTY to Dvorak" if settings.remap_from_qwerty else "off",
        settings.words_per_lesson,
    )

    app = QApplication(sys.argv)
    app.setApplicationName("aoeu")
    app.setApplicationDisplayName("aoeu")

    window = MainWindow(
        lambda sink: LessonRunner(
            lessons.all(),
            sampler,
            clock=MonotonicClock(),
            sink=sink,
            remapper=remapper,
            words_per_lesson=settings.words_per_lesson,
        )
    )
    window.start()
    if window.done:
        logging.error("No lesson could be started")
        sys.exit(1)

    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(int(geometry.width() * 0.8), int(geometry.height() * 0.8))
    window.show()

    sys.exit(app.exec())
