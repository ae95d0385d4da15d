from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set


@dataclass(frozen=True)
class WordResult:
    """A completed word and the character indices typed wrong in it."""

    word: str
    wrong_chars: FrozenSet[int] = frozenset()

    @property
    def is_wrong(self) -> bool:
        return bool(self.wrong_chars)


class InputTracker:
    """Per-word keystroke state: typed characters and mismatching positions.

    Indices count characters (code points), never bytes. Characters typed past
    the end of the target are always mismatches. There is no backspace; a word
    is finished as soon as the typed length reaches the target length.
    """

    def __init__(self, target: str = "") -> None:
        self._target = target
        self._typed: List[str] = []
        self._wrong: Set[int] = set()

    @property
    def target(self) -> str:
        return self._target

    @property
    def typed(self) -> str:
        return "".join(self._typed)

    @property
    def wrong_positions(self) -> FrozenSet[int]:
        return frozenset(self._wrong)

    def reset(self, target: str) -> None:
        """Start tracking a new target word."""
        self._target = target
        self._typed.clear()
        self._wrong.clear()

    def type_char(self, ch: str) -> Optional[WordResult]:
        """Record one typed character.

        Returns the finished ``WordResult`` when this keystroke completes the
        word, otherwise None. The tracker is cleared after completion; the
        caller supplies the next target via ``reset``.
        """
        self._typed.append(ch)
        index = max(0, len(self._typed) - 1)
        expected = self._target[index] if index < len(self._target) else None
        if expected != self._typed[index]:
            self._wrong.add(index)

        if len(self._typed) < len(self._target):
            return None

        result = WordResult(word=self._target, wrong_chars=frozenset(self._wrong))
        self._typed.clear()
        self._wrong.clear()
        return result
