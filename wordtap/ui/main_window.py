from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPoint, Qt, QTimer
from PySide6.QtGui import QCloseEvent, QInputMethodEvent, QKeyEvent
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from wordtap.core.session import (
    PausedPhase,
    ResultsPhase,
    SessionSnapshot,
    SettingsPhase,
    TypingSession,
)
from wordtap.ui.colors import TypingColors
from wordtap.ui.formatting import (
    counter_title,
    format_seconds,
    help_text,
    result_item_html,
    results_summary,
    styled_chars_html,
)
from wordtap.ui.keys import translate_commit, translate_key
from wordtap.ui.settings_overlay import SettingsOverlay

logger = logging.getLogger(__name__)


def _centered_label(style: str, text_format: Qt.TextFormat = Qt.PlainText) -> QLabel:
    label = QLabel()
    label.setTextFormat(text_format)
    label.setAlignment(Qt.AlignCenter)
    label.setStyleSheet(style)
    return label


class MainWindow(QMainWindow):
    """Single-screen trainer window.

    Every key press is handed to the session, then the whole window is redrawn
    from a fresh snapshot. The window never changes session state on its own;
    the clock timer only re-reads the elapsed time.
    """

    def __init__(self, session: TypingSession) -> None:
        super().__init__()
        self._session = session

        self._results_list: Optional[QListWidget] = None
        self._summary_label: Optional[QLabel] = None
        self._word_label: Optional[QLabel] = None
        self._counter_label: Optional[QLabel] = None
        self._input_label: Optional[QLabel] = None
        self._start_prompt: Optional[QLabel] = None
        self._clock_label: Optional[QLabel] = None
        self._help_label: Optional[QLabel] = None
        self._listed_words: tuple = ()

        self.setWindowTitle("Wordtap")
        self.setMinimumSize(640, 480)
        self.setFocusPolicy(Qt.StrongFocus)
        # committed CJK text arrives through inputMethodEvent only
        self.setAttribute(Qt.WA_InputMethodEnabled, True)
        self._build_ui()
        self._settings_overlay = SettingsOverlay(self.centralWidget())

        self._clock_timer = QTimer(self)
        self._clock_timer.setInterval(100)
        self._clock_timer.timeout.connect(self._refresh_clock)
        self._clock_timer.start()

        self.render()

    def _build_ui(self) -> None:
        root = QWidget()
        root.setStyleSheet(f"background: {TypingColors.BG};")
        layout = QVBoxLayout(root)
        layout.setContentsMargins(32, 24, 32, 16)
        layout.setSpacing(12)

        self._results_list = QListWidget()
        self._results_list.setFocusPolicy(Qt.NoFocus)
        self._results_list.setStyleSheet(
            f"""
            QListWidget {{
                background: {TypingColors.PANEL_BG};
                border: 1px solid {TypingColors.BORDER};
                border-radius: 10px;
                color: {TypingColors.TEXT_PRIMARY};
                font-size: 15px;
            }}
            QListWidget::item:selected {{
                background: {TypingColors.BORDER};
            }}
            """
        )
        layout.addWidget(self._results_list, 1)

        self._summary_label = _centered_label(f"color: {TypingColors.TEXT_PRIMARY}; font-size: 15px;")
        self._summary_label.setWordWrap(True)
        layout.addWidget(self._summary_label)

        layout.addStretch(1)
        self._word_label = _centered_label(
            f"color: {TypingColors.TEXT_PRIMARY}; font-size: 34px; font-weight: 800;"
        )
        layout.addWidget(self._word_label)

        input_frame = QFrame()
        input_frame.setObjectName("inputFrame")
        input_frame.setStyleSheet(
            f"""
            QFrame#inputFrame {{
                border: 1px solid {TypingColors.BORDER};
                border-radius: 10px;
            }}
            """
        )
        frame_layout = QVBoxLayout(input_frame)
        frame_layout.setContentsMargins(12, 6, 12, 10)
        self._counter_label = QLabel()
        self._counter_label.setStyleSheet(f"color: {TypingColors.TEXT_MUTED}; font-size: 12px; border: none;")
        frame_layout.addWidget(self._counter_label)
        self._input_label = _centered_label("font-size: 26px; border: none;", Qt.RichText)
        self._input_label.setMinimumHeight(40)
        frame_layout.addWidget(self._input_label)
        layout.addWidget(input_frame)

        self._start_prompt = _centered_label(f"color: {TypingColors.TEXT_MUTED}; font-size: 14px;")
        self._start_prompt.setText("Enter any character to start")
        layout.addWidget(self._start_prompt)

        self._clock_label = _centered_label(f"color: {TypingColors.TEXT_MUTED}; font-size: 14px;")
        layout.addWidget(self._clock_label)
        layout.addStretch(1)

        self._help_label = QLabel()
        self._help_label.setStyleSheet(f"color: {TypingColors.TEXT_MUTED}; font-size: 12px;")
        layout.addWidget(self._help_label)

        self.setCentralWidget(root)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        events = translate_key(event.key(), event.text())
        if not events:
            super().keyPressEvent(event)
            return
        self._dispatch(events)

    def inputMethodEvent(self, event: QInputMethodEvent) -> None:
        """Feed text committed by an input method (Japanese, Chinese) to the session."""
        events = translate_commit(event.commitString())
        if events:
            self._dispatch(events)
        event.accept()

    def inputMethodQuery(self, query: Qt.InputMethodQuery):
        if query == Qt.ImEnabled:
            return True
        if query == Qt.ImCursorRectangle:
            frame = self._input_label.parentWidget()
            return self._input_label.geometry().translated(frame.mapTo(self, QPoint(0, 0)))
        return super().inputMethodQuery(query)

    def _dispatch(self, events) -> None:
        self._session.handle_keys(events)
        if self._session.exit_requested:
            logger.info("Exit requested")
            QApplication.instance().quit()
            return
        self.render()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._settings_overlay.setGeometry(self.centralWidget().rect())

    def closeEvent(self, event: QCloseEvent) -> None:
        self._clock_timer.stop()
        super().closeEvent(event)

    def render(self) -> None:
        """Redraw everything from a session snapshot."""
        snapshot = self._session.snapshot()
        phase = snapshot.phase
        in_results = isinstance(phase, ResultsPhase)

        self._results_list.setVisible(in_results)
        self._summary_label.setVisible(in_results)
        self._word_label.setVisible(not in_results)
        self._input_label.parentWidget().setVisible(not in_results)
        self._start_prompt.setVisible(not in_results and not snapshot.started)
        self._clock_label.setVisible(not in_results and snapshot.started)
        self._help_label.setText(help_text(snapshot))

        if in_results:
            self._render_results(snapshot)
        else:
            self._render_typing(snapshot)

        if isinstance(phase, SettingsPhase):
            self._settings_overlay.update_from(snapshot)
            self._settings_overlay.setGeometry(self.centralWidget().rect())
            self._settings_overlay.show()
            self._settings_overlay.raise_()
        else:
            self._settings_overlay.hide()

    def _render_typing(self, snapshot: SessionSnapshot) -> None:
        paused = isinstance(snapshot.phase, PausedPhase)
        self._word_label.setText(snapshot.current_word)
        self._counter_label.setText(counter_title(snapshot))
        self._input_label.setText(
            styled_chars_html(snapshot.typed_input, snapshot.wrong_positions, dim=0.5 if paused else 0.0)
        )
        self._clock_label.setText(format_seconds(snapshot.elapsed))

    def _render_results(self, snapshot: SessionSnapshot) -> None:
        self._summary_label.setText(results_summary(snapshot))
        if self._listed_words != snapshot.completed_words:
            self._listed_words = snapshot.completed_words
            self._results_list.clear()
            for i, result in enumerate(snapshot.completed_words):
                item = QListWidgetItem()
                label = QLabel(result_item_html(i, result))
                label.setTextFormat(Qt.RichText)
                label.setStyleSheet("background: transparent; font-size: 15px; padding: 2px 6px;")
                self._results_list.addItem(item)
                self._results_list.setItemWidget(item, label)
        self._results_list.setCurrentRow(snapshot.phase.cursor)

    def _refresh_clock(self) -> None:
        if self._clock_label.isVisible():
            self._clock_label.setText(format_seconds(self._session.snapshot().elapsed))
