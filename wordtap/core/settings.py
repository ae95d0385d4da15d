from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wordtap.core.languages import Language

MAX_LIMIT = 65535


class SettingField(Enum):
    LANGUAGE = "language"
    LIMIT = "limit"


@dataclass(frozen=True)
class AppliedSettings:
    """Outcome of committing staged settings."""

    language: Language
    limit: int
    changed: bool


def _parse_int(text: str, default: int) -> int:
    try:
        return int(text)
    except ValueError:
        return default


class SettingsStaging:
    """Working copy of the language and words limit edited on the settings screen.

    The limit is kept as text so digits can be typed freely; it is only parsed
    when adjusted with the arrow keys or when applied.
    """

    def __init__(self, language: Language, limit: int) -> None:
        self.language = language
        self.limit_text = str(limit)
        self.field = SettingField.LANGUAGE

    def open(self, language: Language, limit: int) -> None:
        """Copy the live values into the working copy."""
        self.language = language
        self.limit_text = str(limit)
        self.field = SettingField.LANGUAGE

    def toggle_field(self) -> None:
        if self.field is SettingField.LANGUAGE:
            self.field = SettingField.LIMIT
        else:
            self.field = SettingField.LANGUAGE

    def adjust_left(self) -> None:
        if self.field is SettingField.LANGUAGE:
            self.language = self.language.previous()
        else:
            self.limit_text = str(max(1, _parse_int(self.limit_text, 1) - 1))

    def adjust_right(self) -> None:
        if self.field is SettingField.LANGUAGE:
            self.language = self.language.next()
        else:
            self.limit_text = str(min(MAX_LIMIT, _parse_int(self.limit_text, 0) + 1))

    def type_digit(self, ch: str) -> None:
        if self.field is SettingField.LIMIT and ch.isdecimal():
            self.limit_text += ch

    def backspace(self) -> None:
        if self.field is SettingField.LIMIT:
            self.limit_text = self.limit_text[:-1]

    def apply(self, live_language: Language, live_limit: int) -> AppliedSettings:
        """Resolve the working copy against the live values.

        An unparsable or non-positive limit silently keeps ``live_limit``.
        """
        limit = _parse_int(self.limit_text, live_limit)
        if limit <= 0:
            limit = live_limit
        changed = self.language != live_language or limit != live_limit
        if not changed:
            return AppliedSettings(live_language, live_limit, changed=False)
        return AppliedSettings(self.language, limit, changed=True)
