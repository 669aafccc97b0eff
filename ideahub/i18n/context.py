"""Language context - explicit locale state handed to renderers."""

import logging
from collections.abc import Iterable, MutableMapping
from typing import Any

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "language"
SUPPORTED_LANGUAGES = ("en", "ar")
RTL_LANGUAGES = frozenset({"ar"})


def group_translations(rows: Iterable[Any]) -> dict[str, dict[str, Any]]:
    """Index translation rows by interface_name, then position_key."""
    grouped: dict[str, dict[str, Any]] = {}
    for row in rows:
        grouped.setdefault(row.interface_name, {})[row.position_key] = row
    return grouped


class LanguageContext:
    """
    Current UI language, its text direction and the translation table.

    When a ``storage`` mapping is given, the language is read from and
    written back to ``storage["language"]``. Direction follows the
    language: Arabic is right-to-left, everything else left-to-right.
    """

    def __init__(
        self,
        language: str | None = None,
        translations: dict[str, dict[str, Any]] | None = None,
        storage: MutableMapping[str, str] | None = None,
        default: str = "en",
    ):
        self._storage = storage
        stored = storage.get(LANGUAGE_KEY) if storage is not None else None
        candidate = language or stored or default
        self.language = candidate if candidate in SUPPORTED_LANGUAGES else default
        self.translations = translations or {}

    @property
    def direction(self) -> str:
        return "rtl" if self.language in RTL_LANGUAGES else "ltr"

    @property
    def is_rtl(self) -> bool:
        return self.direction == "rtl"

    def set_language(self, language: str) -> None:
        """Switch language, persisting it when storage is attached."""
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        self.language = language
        if self._storage is not None:
            self._storage[LANGUAGE_KEY] = language

    def pick(self, en: str, ar: str) -> str:
        """Choose between an English and an Arabic literal."""
        return ar if self.language == "ar" else en

    def t(self, interface_name: str, key: str) -> str:
        """Translate a UI string; falls back to the key itself."""
        translation = self.translations.get(interface_name, {}).get(key)
        if translation is None:
            logger.warning("Translation not found: %s.%s", interface_name, key)
            return key
        return translation.arabic_text if self.language == "ar" else translation.english_text
