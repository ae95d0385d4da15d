from __future__ import annotations

from enum import Enum
from typing import Optional


class Language(Enum):
    """Word-list languages, declared in settings cycling order."""

    EN = "EN"
    RU = "RU"
    DE = "DE"
    ES = "ES"
    FR = "FR"
    JA = "JA"
    ZH = "ZH"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Optional["Language"]:
        """Look up a language by its code, ignoring case. Unknown codes give None."""
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            return None

    def next(self) -> "Language":
        members = list(Language)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> "Language":
        members = list(Language)
        return members[(members.index(self) - 1) % len(members)]
