"""Tests for wordtap.core.settings – staged settings editing and commit."""

from __future__ import annotations

import pytest

from wordtap.core.languages import Language
from wordtap.core.settings import MAX_LIMIT, AppliedSettings, SettingField, SettingsStaging


@pytest.fixture()
def staging() -> SettingsStaging:
    return SettingsStaging(Language.EN, 50)


@pytest.fixture()
def limit_staging(staging: SettingsStaging) -> SettingsStaging:
    staging.toggle_field()
    return staging


# ---------------------------------------------------------------------------
# open / field focus
# ---------------------------------------------------------------------------

class TestOpen:
    def test_initial_values(self, staging: SettingsStaging):
        assert staging.language is Language.EN
        assert staging.limit_text == "50"
        assert staging.field is SettingField.LANGUAGE

    def test_open_copies_live_values(self, limit_staging: SettingsStaging):
        limit_staging.type_digit("7")
        limit_staging.open(Language.FR, 12)
        assert limit_staging.language is Language.FR
        assert limit_staging.limit_text == "12"
        assert limit_staging.field is SettingField.LANGUAGE

    def test_toggle_field_flips(self, staging: SettingsStaging):
        staging.toggle_field()
        assert staging.field is SettingField.LIMIT
        staging.toggle_field()
        assert staging.field is SettingField.LANGUAGE


# ---------------------------------------------------------------------------
# language field
# ---------------------------------------------------------------------------

class TestLanguageField:
    def test_right_cycles_forward(self, staging: SettingsStaging):
        staging.adjust_right()
        assert staging.language is Language.RU

    def test_left_wraps_backward(self, staging: SettingsStaging):
        staging.adjust_left()
        assert staging.language is Language.ZH

    def test_digits_ignored_on_language(self, staging: SettingsStaging):
        staging.type_digit("5")
        staging.backspace()
        assert staging.limit_text == "50"


# ---------------------------------------------------------------------------
# limit field
# ---------------------------------------------------------------------------

class TestLimitField:
    def test_left_decrements(self, limit_staging: SettingsStaging):
        limit_staging.adjust_left()
        assert limit_staging.limit_text == "49"

    def test_left_floors_at_one(self, limit_staging: SettingsStaging):
        limit_staging.limit_text = "1"
        limit_staging.adjust_left()
        assert limit_staging.limit_text == "1"

    def test_left_on_garbage_gives_one(self, limit_staging: SettingsStaging):
        limit_staging.limit_text = ""
        limit_staging.adjust_left()
        assert limit_staging.limit_text == "1"

    def test_right_increments(self, limit_staging: SettingsStaging):
        limit_staging.adjust_right()
        assert limit_staging.limit_text == "51"

    def test_right_caps_at_max(self, limit_staging: SettingsStaging):
        limit_staging.limit_text = str(MAX_LIMIT)
        limit_staging.adjust_right()
        assert limit_staging.limit_text == "65535"

    def test_right_on_empty_gives_one(self, limit_staging: SettingsStaging):
        limit_staging.limit_text = ""
        limit_staging.adjust_right()
        assert limit_staging.limit_text == "1"

    def test_type_digit_appends(self, limit_staging: SettingsStaging):
        limit_staging.type_digit("0")
        assert limit_staging.limit_text == "500"

    def test_non_digit_ignored(self, limit_staging: SettingsStaging):
        limit_staging.type_digit("x")
        assert limit_staging.limit_text == "50"

    def test_backspace_removes_last(self, limit_staging: SettingsStaging):
        limit_staging.backspace()
        assert limit_staging.limit_text == "5"
        limit_staging.backspace()
        limit_staging.backspace()
        assert limit_staging.limit_text == ""


# ---------------------------------------------------------------------------
# apply
# ---------------------------------------------------------------------------

class TestApply:
    def test_unchanged(self, staging: SettingsStaging):
        assert staging.apply(Language.EN, 50) == AppliedSettings(Language.EN, 50, changed=False)

    def test_changed_limit(self, limit_staging: SettingsStaging):
        limit_staging.limit_text = "10"
        assert limit_staging.apply(Language.EN, 50) == AppliedSettings(Language.EN, 10, changed=True)

    def test_changed_language(self, staging: SettingsStaging):
        staging.adjust_right()
        assert staging.apply(Language.EN, 50) == AppliedSettings(Language.RU, 50, changed=True)

    @pytest.mark.parametrize("text", ["", "0", "abc", "-3"])
    def test_invalid_limit_keeps_live(self, limit_staging: SettingsStaging, text: str):
        limit_staging.limit_text = text
        assert limit_staging.apply(Language.EN, 50) == AppliedSettings(Language.EN, 50, changed=False)

    def test_invalid_limit_with_new_language(self, limit_staging: SettingsStaging):
        limit_staging.limit_text = ""
        limit_staging.toggle_field()
        limit_staging.adjust_right()
        assert limit_staging.apply(Language.EN, 50) == AppliedSettings(Language.RU, 50, changed=True)
