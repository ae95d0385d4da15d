from __future__ import annotations

from typing import Sequence

from wordtap.core.input_tracker import WordResult


def calculate_accuracy(words: Sequence[WordResult]) -> float:
    """Share of correctly typed characters over all completed words, in percent.

    Nothing typed counts as 100%. Mistakes typed past a word's end can outnumber
    its characters, so the result is clamped to [0, 100].
    """
    total_chars = sum(len(w.word) for w in words)
    total_wrong = sum(len(w.wrong_chars) for w in words)
    if total_chars == 0:
        return 100.0
    accuracy = (total_chars - total_wrong) / total_chars * 100.0
    return max(0.0, min(100.0, accuracy))


def calculate_wpm(words: Sequence[WordResult], seconds: float) -> float:
    """Words per minute from correct characters: (correct / 5) / minutes."""
    if seconds <= 0:
        return 0.0
    total_chars = sum(len(w.word) for w in words)
    total_wrong = sum(len(w.wrong_chars) for w in words)
    correct = max(0, total_chars - total_wrong)
    return (correct / 5.0) / (seconds / 60.0)
