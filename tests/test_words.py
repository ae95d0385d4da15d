"""Tests for wordtap.core.words – YAML word lists."""

from __future__ import annotations

import random
import textwrap
from pathlib import Path

import pytest

from wordtap.core.languages import Language
from wordtap.core.words import WordSource


@pytest.fixture()
def words_dir(tmp_path: Path) -> Path:
    d = tmp_path / "words"
    d.mkdir()
    return d


def write(d: Path, name: str, body: str) -> None:
    (d / name).write_text(textwrap.dedent(body), encoding="utf-8")


# ---------------------------------------------------------------------------
# Bundled lists
# ---------------------------------------------------------------------------

class TestBundledLists:
    @pytest.mark.parametrize("language", list(Language))
    def test_every_language_has_words(self, language: Language):
        words = WordSource().words(language)
        assert words
        assert all(w and isinstance(w, str) for w in words)

    def test_next_returns_listed_word(self):
        source = WordSource(rng=random.Random(7))
        assert source.next(Language.DE) in source.words(Language.DE)


# ---------------------------------------------------------------------------
# Loading from a directory
# ---------------------------------------------------------------------------

class TestLoading:
    def test_list_form(self, words_dir: Path):
        write(words_dir, "en.yaml", """
            words:
              - alpha
              - "  "
              - beta
        """)
        assert WordSource(words_dir).words(Language.EN) == ["alpha", "beta"]

    def test_block_form(self, words_dir: Path):
        write(words_dir, "fr.yaml", """
            words: |
              chat chien
              maison
        """)
        assert WordSource(words_dir).words(Language.FR) == ["chat", "chien", "maison"]

    def test_cached_after_first_load(self, words_dir: Path):
        write(words_dir, "en.yaml", "words: [one]\n")
        source = WordSource(words_dir)
        source.words(Language.EN)
        (words_dir / "en.yaml").unlink()
        assert source.next(Language.EN) == "one"

    def test_missing_file(self, words_dir: Path):
        with pytest.raises(FileNotFoundError):
            WordSource(words_dir).next(Language.RU)

    def test_missing_words_key(self, words_dir: Path):
        write(words_dir, "en.yaml", "name: English\n")
        with pytest.raises(ValueError, match="missing 'words'"):
            WordSource(words_dir).next(Language.EN)

    def test_empty_words(self, words_dir: Path):
        write(words_dir, "en.yaml", "words: []\n")
        with pytest.raises(ValueError, match="empty"):
            WordSource(words_dir).next(Language.EN)

    def test_not_a_mapping(self, words_dir: Path):
        write(words_dir, "en.yaml", "- a\n- b\n")
        with pytest.raises(ValueError):
            WordSource(words_dir).next(Language.EN)

    def test_seeded_rng_is_repeatable(self, words_dir: Path):
        write(words_dir, "en.yaml", "words: [a, b, c, d, e, f]\n")
        first = WordSource(words_dir, random.Random(3))
        second = WordSource(words_dir, random.Random(3))
        assert [first.next(Language.EN) for _ in range(5)] == [second.next(Language.EN) for _ in range(5)]
