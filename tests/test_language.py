"""Unit tests for the language context."""

from types import SimpleNamespace

import pytest

from ideahub.i18n.context import LANGUAGE_KEY, LanguageContext, group_translations


def row(interface, key, en, ar):
    return SimpleNamespace(interface_name=interface, position_key=key, english_text=en, arabic_text=ar)


def test_defaults_to_english_ltr():
    ctx = LanguageContext()
    assert ctx.language == "en"
    assert ctx.direction == "ltr"
    assert not ctx.is_rtl


def test_reads_persisted_language():
    ctx = LanguageContext(storage={LANGUAGE_KEY: "ar"})
    assert ctx.language == "ar"
    assert ctx.direction == "rtl"


def test_unsupported_stored_language_falls_back():
    assert LanguageContext(storage={LANGUAGE_KEY: "fr"}).language == "en"


def test_set_language_persists_and_flips_direction():
    storage = {}
    ctx = LanguageContext(storage=storage)
    ctx.set_language("ar")
    assert storage[LANGUAGE_KEY] == "ar"
    assert ctx.is_rtl
    ctx.set_language("en")
    assert storage[LANGUAGE_KEY] == "en"
    assert ctx.direction == "ltr"


def test_set_language_rejects_unknown():
    with pytest.raises(ValueError):
        LanguageContext().set_language("de")


def test_translate_and_missing_key(caplog):
    grouped = group_translations([row("dashboard", "my_drafts", "My Drafts", "مسوداتي")])
    ctx = LanguageContext("ar", translations=grouped)
    assert ctx.t("dashboard", "my_drafts") == "مسوداتي"
    assert ctx.t("dashboard", "missing") == "missing"
    assert "Translation not found: dashboard.missing" in caplog.text
