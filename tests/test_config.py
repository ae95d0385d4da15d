"""Tests for wordtap.core.config – config file loading and defaults."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from wordtap.core.config import DEFAULT_LIMIT, Config, ConfigStore
from wordtap.core.languages import Language


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "wordtap" / "config.yaml"


@pytest.fixture()
def store(config_path: Path) -> ConfigStore:
    """ConfigStore backed by a temp file so tests don't touch ~/.wordtap."""
    return ConfigStore(config_path)


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

class TestConfig:
    def test_defaults(self):
        c = Config()
        assert c.language is Language.EN
        assert c.limit == DEFAULT_LIMIT == 50


# ---------------------------------------------------------------------------
# First run
# ---------------------------------------------------------------------------

class TestFirstLoad:
    def test_creates_default_file(self, store: ConfigStore, config_path: Path):
        assert store.load() == Config()
        assert config_path.exists()

    def test_default_file_is_readable_yaml(self, store: ConfigStore, config_path: Path):
        store.load()
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        assert payload == {"language": "EN", "limit": 50}

    def test_default_file_lists_languages(self, store: ConfigStore, config_path: Path):
        store.load()
        text = config_path.read_text(encoding="utf-8")
        assert '"ZH"' in text
        assert text.count("#") >= 3


# ---------------------------------------------------------------------------
# Existing files
# ---------------------------------------------------------------------------

class TestLoadExisting:
    def test_round_trip(self, store: ConfigStore):
        store.save(Config(Language.DE, 12))
        assert store.load() == Config(Language.DE, 12)

    def test_lowercase_language(self, store: ConfigStore, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("language: fr\nlimit: 5\n", encoding="utf-8")
        assert store.load() == Config(Language.FR, 5)

    def test_zero_limit_is_kept(self, store: ConfigStore, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("language: EN\nlimit: 0\n", encoding="utf-8")
        assert store.load().limit == 0

    def test_unknown_language_falls_back_to_en(self, store: ConfigStore, config_path: Path, caplog):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("language: XX\nlimit: 7\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert store.load() == Config(Language.EN, 7)
        assert "Unknown language" in caplog.text

    @pytest.mark.parametrize(
        "body",
        [
            "language: EN\nlimit: -4\n",
            "language: EN\nlimit: many\n",
            "language: EN\nlimit: yes\n",
            "- just\n- a list\n",
            "language: [unclosed\n",
        ],
    )
    def test_malformed_falls_back_to_defaults(self, store: ConfigStore, config_path: Path, body: str):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(body, encoding="utf-8")
        assert store.load() == Config()

    def test_missing_keys_use_defaults(self, store: ConfigStore, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("language: JA\n", encoding="utf-8")
        assert store.load() == Config(Language.JA, DEFAULT_LIMIT)


# ---------------------------------------------------------------------------
# save failures
# ---------------------------------------------------------------------------

class TestSaveFailure:
    def test_unwritable_location_is_logged(self, tmp_path: Path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        store = ConfigStore(blocker / "config.yaml")
        with caplog.at_level(logging.WARNING):
            store.save(Config())
        assert "Could not save config" in caplog.text

    def test_load_still_returns_defaults(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        assert ConfigStore(blocker / "config.yaml").load() == Config()
