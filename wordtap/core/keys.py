"""Toolkit-independent key events fed into the typing session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    CHAR = "char"
    ESCAPE = "escape"
    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    BACKSPACE = "backspace"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""

    @classmethod
    def of_char(cls, ch: str) -> "KeyEvent":
        return cls(Key.CHAR, ch)
