"""Translate Qt key presses and input-method commits into session key events."""

from __future__ import annotations

from typing import List

from PySide6.QtCore import Qt

from wordtap.core.keys import Key, KeyEvent

# Keys that never act on their own
_MODIFIER_KEYS = (
    Qt.Key.Key_Shift,
    Qt.Key.Key_Control,
    Qt.Key.Key_Alt,
    Qt.Key.Key_AltGr,
    Qt.Key.Key_Meta,
    Qt.Key.Key_Super_L,
    Qt.Key.Key_Super_R,
    Qt.Key.Key_CapsLock,
    Qt.Key.Key_NumLock,
    Qt.Key.Key_ScrollLock,
)


def translate_commit(text: str) -> List[KeyEvent]:
    """One CHAR event per printable character of committed text."""
    return [KeyEvent.of_char(ch) for ch in text if ch.isprintable()]


def translate_key(key: int, text: str) -> List[KeyEvent]:
    """Map a Qt key code and its text to zero or more session events.

    Named keys win over their text (Escape and Return carry control
    characters). Printable text yields one event per character. Any other
    real key becomes ``Key.OTHER``; bare modifiers yield nothing.
    """
    if key == Qt.Key.Key_Escape:
        return [KeyEvent(Key.ESCAPE)]
    elif key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
        return [KeyEvent(Key.ENTER)]
    elif key == Qt.Key.Key_Up:
        return [KeyEvent(Key.UP)]
    elif key == Qt.Key.Key_Down:
        return [KeyEvent(Key.DOWN)]
    elif key == Qt.Key.Key_Left:
        return [KeyEvent(Key.LEFT)]
    elif key == Qt.Key.Key_Right:
        return [KeyEvent(Key.RIGHT)]
    elif key == Qt.Key.Key_Backspace:
        return [KeyEvent(Key.BACKSPACE)]
    elif text and text.isprintable():
        return translate_commit(text)
    elif key in _MODIFIER_KEYS or key in (0, Qt.Key.Key_unknown):
        return []
    return [KeyEvent(Key.OTHER)]
