from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Set, Tuple, Union

from wordtap.core.accuracy import calculate_accuracy, calculate_wpm
from wordtap.core.config import Config
from wordtap.core.input_tracker import InputTracker, WordResult
from wordtap.core.keys import Key, KeyEvent
from wordtap.core.languages import Language
from wordtap.core.settings import SettingField, SettingsStaging
from wordtap.core.timing import Clock, TimingEngine
from wordtap.core.words import WordSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputPhase:
    """Typing words, or waiting for the first keystroke."""


@dataclass(frozen=True)
class PausedPhase:
    paused_at: float


@dataclass(frozen=True)
class ResultsPhase:
    cursor: int = 0


@dataclass(frozen=True)
class SettingsPhase:
    """Editing staged settings; ``paused_at`` is set when opened from a pause."""

    paused_at: Optional[float] = None


Phase = Union[InputPhase, PausedPhase, ResultsPhase, SettingsPhase]


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session handed to the renderer each frame."""

    phase: Phase
    language: Language
    words_limit: int
    current_word: str
    typed_input: str
    wrong_positions: FrozenSet[int]
    completed_words: Tuple[WordResult, ...]
    wrong_word_indices: FrozenSet[int]
    started: bool
    elapsed: float
    finished_duration: Optional[float]
    accuracy: Optional[float]
    wpm: Optional[float]
    staged_language: Language
    staged_limit_text: str
    staged_field: SettingField


class TypingSession:
    """The typing trainer state machine.

    Consumes one ``KeyEvent`` at a time and moves between the input, paused,
    results and settings phases::

        Input    --Esc-->          Paused
        Input    --last word-->    Results
        Paused   --s-->            Settings   (q quits, any other key resumes)
        Results  --r-->            Input      (restart; s opens settings, q quits)
        Settings --Enter/Esc-->    Input

    Quitting only raises ``exit_requested``; the caller owns the event loop.
    """

    def __init__(self, config: Config, word_source: WordSource, clock: Clock = time.monotonic) -> None:
        if config.limit <= 0:
            raise ValueError(f"Words limit must be positive, got {config.limit}")
        self._word_source = word_source
        self._language = config.language
        self._words_limit = config.limit
        self._timing = TimingEngine(clock)
        self._tracker = InputTracker(self._word_source.next(self._language))
        self._staging = SettingsStaging(self._language, self._words_limit)
        self._completed: List[WordResult] = []
        self._wrong_words: Set[int] = set()
        self._settings_changed = False
        self._phase: Phase = InputPhase()
        self._exit_requested = False

    # -- read access -------------------------------------------------------

    @property
    def phase(self) -> Phase:
        """The active phase, with its payload."""
        return self._phase

    @property
    def language(self) -> Language:
        """Language the current words are drawn from."""
        return self._language

    @property
    def words_limit(self) -> int:
        """Number of words that completes a session."""
        return self._words_limit

    @property
    def current_word(self) -> str:
        """The word being typed."""
        return self._tracker.target

    @property
    def typed_input(self) -> str:
        """Characters typed so far for the current word."""
        return self._tracker.typed

    @property
    def wrong_positions(self) -> FrozenSet[int]:
        """Mismatching character indices in the current word."""
        return self._tracker.wrong_positions

    @property
    def completed_words(self) -> Tuple[WordResult, ...]:
        """Finished words in typing order."""
        return tuple(self._completed)

    @property
    def wrong_word_indices(self) -> FrozenSet[int]:
        """Indices into ``completed_words`` of words with at least one mistake."""
        return frozenset(self._wrong_words)

    @property
    def start_time(self) -> Optional[float]:
        """Clock reading of the first keystroke, shifted by pauses; None before it."""
        return self._timing.start_time

    @property
    def finished_duration(self) -> Optional[float]:
        """Active seconds of a finished session, or None."""
        return self._timing.finished_duration

    @property
    def staging(self) -> SettingsStaging:
        """Working copy edited on the settings screen."""
        return self._staging

    @property
    def exit_requested(self) -> bool:
        """True once q was pressed in the paused or results phase."""
        return self._exit_requested

    def accuracy(self) -> float:
        """Accuracy over completed words, in percent."""
        return calculate_accuracy(self._completed)

    def wpm(self) -> float:
        """Words per minute over completed words and active time."""
        return calculate_wpm(self._completed, self._timing.elapsed())

    def snapshot(self) -> SessionSnapshot:
        """Freeze the current state for rendering. Accuracy and WPM are only filled in results."""
        in_results = isinstance(self._phase, ResultsPhase)
        return SessionSnapshot(
            phase=self._phase,
            language=self._language,
            words_limit=self._words_limit,
            current_word=self.current_word,
            typed_input=self.typed_input,
            wrong_positions=self.wrong_positions,
            completed_words=self.completed_words,
            wrong_word_indices=self.wrong_word_indices,
            started=self._timing.is_started,
            elapsed=self._timing.elapsed(),
            finished_duration=self._timing.finished_duration,
            accuracy=self.accuracy() if in_results else None,
            wpm=self.wpm() if in_results else None,
            staged_language=self._staging.language,
            staged_limit_text=self._staging.limit_text,
            staged_field=self._staging.field,
        )

    # -- event dispatch ----------------------------------------------------

    def handle_key(self, event: KeyEvent) -> None:
        """Dispatch one key event according to the current phase."""
        if isinstance(self._phase, InputPhase):
            self._handle_input_key(event)
        elif isinstance(self._phase, PausedPhase):
            self._handle_paused_key(event)
        elif isinstance(self._phase, ResultsPhase):
            self._handle_results_key(event)
        else:
            self._handle_settings_key(event)

    def handle_keys(self, events: Sequence[KeyEvent]) -> None:
        """Dispatch events from one physical key press or input-method commit.

        Feeding stops at the first phase change or exit request, so text typed
        past the last word or after Esc is never read as a command.
        """
        phase_type = type(self._phase)
        for event in events:
            if self._exit_requested or type(self._phase) is not phase_type:
                logger.debug("Dropping %r after phase change", event)
                return
            self.handle_key(event)

    def _handle_input_key(self, event: KeyEvent) -> None:
        if event.key is Key.ESCAPE:
            self.pause()
        elif event.key is Key.CHAR and event.char:
            self.type_char(event.char)

    def _handle_paused_key(self, event: KeyEvent) -> None:
        if event.key is Key.CHAR and event.char == "q":
            self._exit_requested = True
        elif event.key is Key.CHAR and event.char == "s":
            self.open_settings()
        else:
            self.resume()

    def _handle_results_key(self, event: KeyEvent) -> None:
        cursor = self._phase.cursor
        if event.key is Key.UP:
            self._phase = ResultsPhase(max(0, cursor - 1))
        elif event.key is Key.DOWN:
            self._phase = ResultsPhase(min(max(0, len(self._completed) - 1), cursor + 1))
        elif event.key is Key.CHAR and event.char == "q":
            self._exit_requested = True
        elif event.key is Key.CHAR and event.char == "r":
            self.restart()
        elif event.key is Key.CHAR and event.char == "s":
            self.open_settings()

    def _handle_settings_key(self, event: KeyEvent) -> None:
        staging = self._staging
        if event.key is Key.ESCAPE:
            self.close_settings()
        elif event.key is Key.ENTER:
            self.apply_settings()
            self.close_settings()
        elif event.key in (Key.UP, Key.DOWN):
            staging.toggle_field()
        elif event.key is Key.LEFT:
            staging.adjust_left()
        elif event.key is Key.RIGHT:
            staging.adjust_right()
        elif event.key is Key.BACKSPACE:
            staging.backspace()
        elif event.key is Key.CHAR:
            staging.type_digit(event.char)

    # -- operations --------------------------------------------------------

    def type_char(self, ch: str) -> None:
        """Feed one character of the current word."""
        self._timing.start()
        result = self._tracker.type_char(ch)
        if result is None:
            return

        if result.is_wrong:
            self._wrong_words.add(len(self._completed))
        self._completed.append(result)

        if len(self._completed) >= self._words_limit:
            self._finish()
        else:
            self._tracker.reset(self._word_source.next(self._language))

    def _finish(self) -> None:
        duration = self._timing.finish()
        self._phase = ResultsPhase(cursor=0)
        logger.info(
            "Session finished: %d words in %.3fs, %d wrong, accuracy %.2f%%",
            len(self._completed),
            duration,
            len(self._wrong_words),
            self.accuracy(),
        )

    def pause(self) -> None:
        """Enter the paused phase; the timer is not touched until resume."""
        self._phase = PausedPhase(self._timing.pause())

    def resume(self) -> None:
        """Back to typing, leaving the paused interval out of the elapsed time."""
        self._timing.resume()
        self._phase = InputPhase()

    def restart(self) -> None:
        """Reset words, timing and input; language and limit are kept."""
        self._completed.clear()
        self._wrong_words.clear()
        self._timing.reset()
        self._tracker.reset(self._word_source.next(self._language))
        self._phase = InputPhase()
        logger.debug("Session restarted (%s, %d words)", self._language.code, self._words_limit)

    def open_settings(self) -> None:
        """Stage the live settings and show the settings screen."""
        paused_at = self._phase.paused_at if isinstance(self._phase, PausedPhase) else None
        self._staging.open(self._language, self._words_limit)
        self._phase = SettingsPhase(paused_at=paused_at)

    def apply_settings(self) -> bool:
        """Commit the staged values; returns True when they differ from the live ones."""
        applied = self._staging.apply(self._language, self._words_limit)
        if applied.changed:
            logger.info(
                "Settings changed: language %s -> %s, limit %d -> %d",
                self._language.code,
                applied.language.code,
                self._words_limit,
                applied.limit,
            )
            self._language = applied.language
            self._words_limit = applied.limit
            self._settings_changed = True
        return applied.changed

    def close_settings(self) -> None:
        """Leave settings for input, restarting if needed.

        A restart happens when a commit changed the settings or when the
        session had already finished. Otherwise a pause interrupted by the
        settings screen is resumed so its time stays excluded.
        """
        finished = self._timing.finished_duration is not None
        if self._settings_changed or finished:
            self._settings_changed = False
            self.restart()
            return
        self._timing.resume()
        self._phase = InputPhase()
