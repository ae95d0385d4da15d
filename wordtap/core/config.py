from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from wordtap.core.languages import Language

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50

_CONFIG_HINT = (
    "# Limit range: 0 < limit\n"
    "# Available words languages: {codes}\n"
    "# This will not affect the language of the interface.\n"
)


@dataclass(frozen=True)
class Config:
    """Persisted settings: word-list language and words per session."""

    language: Language = Language.EN
    limit: int = DEFAULT_LIMIT


class ConfigStore:
    """Reads and writes the user configuration.

    File: ~/.wordtap/config.yaml. Created with defaults on first load. Any
    problem reading it falls back to defaults, so startup never fails here.
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or Path.home() / ".wordtap" / "config.yaml"

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> Config:
        if not self._file_path.exists():
            config = Config()
            self.save(config)
            return config
        try:
            payload = yaml.safe_load(self._file_path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load config from %s: %s. Using default.", self._file_path, e)
            return Config()
        return self._parse(payload)

    def save(self, config: Config) -> None:
        payload = {"language": config.language.code, "limit": config.limit}
        hint = _CONFIG_HINT.format(codes=" ".join(f'"{lang.code}"' for lang in Language))
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                yaml.safe_dump(payload, sort_keys=False) + "\n" + hint,
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning("Could not save config to %s: %s", self._file_path, e)

    def _parse(self, payload: object) -> Config:
        if not isinstance(payload, dict):
            logger.warning("Config %s is not a mapping. Using default.", self._file_path)
            return Config()

        limit = payload.get("limit", DEFAULT_LIMIT)
        # bool is an int subclass; "limit: yes" is not a count
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            logger.warning("Invalid limit %r in %s. Using default.", limit, self._file_path)
            return Config()

        code = payload.get("language", Language.EN.code)
        language = Language.from_code(code)
        if language is None:
            logger.warning("Unknown language %r in %s, falling back to EN", code, self._file_path)
            language = Language.EN
        return Config(language=language, limit=limit)
