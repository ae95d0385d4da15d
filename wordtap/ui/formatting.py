"""Text produced for the window from a session snapshot. No Qt here."""

from __future__ import annotations

import html
from typing import AbstractSet

from wordtap.core.input_tracker import WordResult
from wordtap.core.session import (
    PausedPhase,
    ResultsPhase,
    SessionSnapshot,
    SettingsPhase,
)
from wordtap.ui.colors import TypingColors, faded

_LANGUAGE_NAMES = {
    "EN": "English",
    "RU": "Russian",
    "DE": "German",
    "ES": "Spanish",
    "FR": "French",
    "JA": "Japanese",
    "ZH": "Chinese",
}


def styled_chars_html(text: str, wrong: AbstractSet[int], dim: float = 0.0) -> str:
    """Rich text for ``text`` with each character green or red by position.

    ``dim`` fades the colors toward the background (used while paused).
    """
    correct = faded(TypingColors.CORRECT, dim)
    mistake = faded(TypingColors.WRONG, dim)
    spans = []
    for i, ch in enumerate(text):
        color = mistake if i in wrong else correct
        spans.append(f'<span style="color:{color}">{html.escape(ch)}</span>')
    return "".join(spans)


def result_item_html(index: int, result: WordResult) -> str:
    """Numbered results-list line: all green for a clean word, per-character otherwise."""
    number = f"{index + 1}. "
    if not result.is_wrong:
        return f'{number}<span style="color:{TypingColors.CORRECT}">{html.escape(result.word)}</span>'
    return number + styled_chars_html(result.word, result.wrong_chars)


def format_seconds(seconds: float) -> str:
    return f"{seconds:.3f}".rstrip("0").rstrip(".") + "s"


def results_summary(snapshot: SessionSnapshot) -> str:
    elapsed = format_seconds(snapshot.finished_duration or 0.0)
    if not snapshot.wrong_word_indices:
        return f"No mistakes, well done! Time elapsed: {elapsed}"
    return (
        f"{len(snapshot.wrong_word_indices)} wrong typed words out of {snapshot.words_limit}, "
        f"Accuracy: {snapshot.accuracy or 0.0:.2f}%, WPM: {snapshot.wpm or 0.0:.1f}, "
        f"time elapsed: {elapsed}"
    )


def counter_title(snapshot: SessionSnapshot) -> str:
    if isinstance(snapshot.phase, PausedPhase):
        return "Paused"
    return f"{len(snapshot.completed_words)}/{snapshot.words_limit}"


def help_text(snapshot: SessionSnapshot) -> str:
    phase = snapshot.phase
    if isinstance(phase, ResultsPhase):
        return "R Restart | Q Exit | S Settings"
    if isinstance(phase, SettingsPhase):
        return "Enter to save | Esc to discard"
    if isinstance(phase, PausedPhase):
        return "Any key to resume | Q to Exit | S for settings"
    return "Press ESC to pause"


def language_label(code: str) -> str:
    return f"{_LANGUAGE_NAMES.get(code, code)} ({code})"
