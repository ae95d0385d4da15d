from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from wordtap.core.languages import Language

logger = logging.getLogger(__name__)


class WordSource:
    """Random words per language, read from ``data/words/<code>.yaml``.

    Each file holds a ``words`` list. Lists are loaded on first use and cached
    for the lifetime of the source.
    """

    def __init__(self, base_dir: Optional[Path] = None, rng: Optional[random.Random] = None) -> None:
        self._base_dir = base_dir or Path(__file__).resolve().parent.parent / "data" / "words"
        self._rng = rng or random.Random()
        self._words: Dict[Language, List[str]] = {}

    def next(self, language: Language) -> str:
        """Return one random, non-empty word for ``language``."""
        return self._rng.choice(self.words(language))

    def words(self, language: Language) -> List[str]:
        if language not in self._words:
            self._words[language] = self._load_words(language)
        return self._words[language]

    def _load_words(self, language: Language) -> List[str]:
        path = self._base_dir / f"{language.code.lower()}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Word list not found: {path}")

        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{path.name}: expected YAML with a 'words' list")
        content = raw.get("words")
        if content is None:
            raise ValueError(f"{path.name}: missing 'words'")
        if isinstance(content, list):
            words = [str(item).strip() for item in content if str(item).strip()]
        else:
            # allow words as a whitespace separated block
            words = str(content).split()
        if not words:
            raise ValueError(f"{path.name}: 'words' is empty")

        logger.info("Loaded %d %s words from %s", len(words), language.code, path.name)
        return words
