"""Typing practice UI: word line, on-screen Dvorak keyboard and word-time sparkline."""

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QFont, QFontMetrics, QPainter, QPen
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from aoeu.core.keymap import KEYBOARD_ROWS, Key, key_glyph
from aoeu.core.session import CharState, Segment
from aoeu.ui.colors import TutorColors, blend_hex

_SEGMENT_COLORS = {
    CharState.CORRECT: TutorColors.CHAR_CORRECT,
    CharState.INCORRECT: TutorColors.CHAR_INCORRECT,
    CharState.UNTYPED: TutorColors.CHAR_UNTYPED,
}


class WordLineWidget(QWidget):
    """One line of text: finished words (muted), the current word, upcoming words."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._finished: Sequence[str] = ()
        self._segments: Sequence[Segment] = ()
        self._remaining: Sequence[str] = ()
        self.setMinimumHeight(80)

    def set_content(
        self,
        finished: Sequence[str],
        segments: Sequence[Segment],
        remaining: Sequence[str],
    ) -> None:
        self._finished = tuple(finished)
        self._segments = tuple(segments)
        self._remaining = tuple(remaining)
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        font = QFont("monospace")
        font.setStyleHint(QFont.Monospace)
        font.setPointSize(22)
        painter.setFont(font)
        metrics = QFontMetrics(font)
        char_w = metrics.horizontalAdvance("m")
        baseline = (self.height() + metrics.ascent() - metrics.descent()) // 2

        # The current word starts at the centre; earlier text scrolls off to the left.
        done = "".join(f"{word} " for word in self._finished)
        x = self.width() // 2 - len(done) * char_w
        painter.setPen(QColor(TutorColors.CHAR_DONE))
        painter.drawText(x, baseline, done)
        x += len(done) * char_w

        cursor = self._cursor_index()
        for index, segment in enumerate(self._segments):
            painter.setPen(QColor(_SEGMENT_COLORS[segment.state]))
            painter.drawText(x, baseline, segment.char)
            if index == cursor:
                painter.setPen(QPen(QColor(TutorColors.PRIMARY), 2))
                painter.drawLine(x, baseline + 4, x + char_w, baseline + 4)
            x += char_w

        painter.setPen(QColor(TutorColors.TEXT_MUTED))
        painter.drawText(x, baseline, "".join(f" {word}" for word in self._remaining))

    def _cursor_index(self) -> int:
        for index, segment in enumerate(self._segments):
            if segment.state is CharState.UNTYPED:
                return index
        return -1


class KeyboardWidget(QWidget):
    """Dvorak keyboard drawn row by row; the last pressed key is highlighted."""

    ROW_INDENT = (0.0, 1.5, 1.75, 2.25)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pressed: Optional[Key] = None
        self.setMinimumSize(480, 180)

    def set_pressed(self, key: Optional[Key]) -> None:
        self._pressed = key
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        columns = max(len(row) + indent for row, indent in zip(KEYBOARD_ROWS, self.ROW_INDENT))
        unit = min(self.width() / columns, self.height() / len(KEYBOARD_ROWS))
        gap = max(2.0, unit * 0.08)
        font = painter.font()
        font.setPointSize(max(8, int(unit * 0.22)))
        painter.setFont(font)

        left = (self.width() - columns * unit) / 2
        for row_index, row in enumerate(KEYBOARD_ROWS):
            y = row_index * unit
            for col, key in enumerate(row):
                x = left + (col + self.ROW_INDENT[row_index]) * unit
                rect = QRectF(x + gap / 2, y + gap / 2, unit - gap, unit - gap)
                pressed = key is self._pressed
                painter.setBrush(QColor(TutorColors.KEY_PRESSED if pressed else TutorColors.KEY_FILL))
                painter.setPen(QPen(QColor(TutorColors.KEY_BORDER), 1))
                painter.drawRoundedRect(rect, 6, 6)
                painter.setPen(QColor("white" if pressed else TutorColors.TEXT_PRIMARY))
                painter.drawText(rect, Qt.AlignCenter, _key_label(key))


def _key_label(key: Key) -> str:
    glyph = key_glyph(key)
    if glyph[0].isalpha():
        return glyph[1]
    return f"{glyph[1]}\n{glyph[0]}"


class SparklineWidget(QWidget):
    """Bar per word, height proportional to its time per character."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._data: Sequence[int] = ()
        self.setMinimumHeight(120)

    def set_data(self, data: Sequence[int]) -> None:
        self._data = tuple(data)
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self._data:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        peak = max(self._data) or 1
        bar_w = self.width() / len(self._data)
        for index, value in enumerate(self._data):
            ratio = value / peak
            height = max(1.0, ratio * (self.height() - 4))
            painter.setBrush(QColor(blend_hex(TutorColors.SPARK_FAST, TutorColors.SPARK_SLOW, ratio)))
            painter.drawRect(QRectF(index * bar_w, self.height() - height, max(1.0, bar_w - 1), height))


class StatCard(QFrame):
    def __init__(self, label: str, bg_color: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("statCard")
        self.setStyleSheet(
            f"""
            QFrame#statCard {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {bg_color}, stop:1 {QColor(bg_color).darker(112).name()});
                border-radius: 16px;
                border: none;
            }}
            """
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 14, 18, 14)
        layout.setSpacing(4)
        label_widget = QLabel(label)
        label_widget.setStyleSheet("color: rgba(255,255,255,0.92); font-size: 12px; font-weight: 600;")
        layout.addWidget(label_widget)
        self.value_label = QLabel("-")
        self.value_label.setStyleSheet("color: white; font-size: 28px; font-weight: 900;")
        layout.addWidget(self.value_label)

    def set_value(self, value: str) -> None:
        self.value_label.setText(str(value))
