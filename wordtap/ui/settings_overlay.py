"""In-window settings overlay."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from wordtap.core.session import SessionSnapshot
from wordtap.core.settings import SettingField
from wordtap.ui.colors import TypingColors
from wordtap.ui.formatting import language_label


def _row_style(focused: bool) -> str:
    if focused:
        return f"color: {TypingColors.FOCUS}; font-size: 15px; font-weight: 800;"
    return f"color: {TypingColors.TEXT_PRIMARY}; font-size: 15px; font-weight: 500;"


class SettingsOverlay(QWidget):
    """Centered card showing the staged language and words limit.

    Purely a view: keys are handled by the main window and the overlay is
    refreshed from the snapshot after each one.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = QWidget(self)
        overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.45);")
        overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        overlay_bg.setMinimumSize(1, 1)
        main_layout.addWidget(overlay_bg, 0, 0)

        container = QFrame(self)
        container.setObjectName("settingsContainer")
        container.setMinimumWidth(420)
        container.setMaximumWidth(520)
        container.setStyleSheet(
            f"""
            QFrame#settingsContainer {{
                background: {TypingColors.PANEL_BG};
                border: 1px solid {TypingColors.BORDER};
                border-radius: 16px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(container)
        shadow.setBlurRadius(24)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 90))
        container.setGraphicsEffect(shadow)

        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(16)

        title = QLabel("Settings")
        title.setStyleSheet(f"color: {TypingColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 800;")
        content.addWidget(title)

        self._language_label = QLabel()
        self._limit_label = QLabel()
        for label in (self._language_label, self._limit_label):
            label.setTextFormat(Qt.PlainText)
        content.addWidget(self._language_label)
        content.addWidget(self._limit_label)

        hint = QLabel("Enter to save | Esc to discard")
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet(f"color: {TypingColors.TEXT_MUTED}; font-size: 12px;")
        content.addWidget(hint)

        main_layout.addWidget(container, 0, 0, Qt.AlignCenter)
        self.hide()

    def update_from(self, snapshot: SessionSnapshot) -> None:
        field = snapshot.staged_field
        self._language_label.setText(
            f"< Left/Right > Language: {language_label(snapshot.staged_language.code)}"
        )
        self._limit_label.setText(
            f"< Left/Right > Words Limit (or type): {snapshot.staged_limit_text}"
        )
        self._language_label.setStyleSheet(_row_style(field is SettingField.LANGUAGE))
        self._limit_label.setStyleSheet(_row_style(field is SettingField.LIMIT))
