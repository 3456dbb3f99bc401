"""Typed persistence of locale state on top of a LocaleStore.

Four store keys are used (names come from I18nSettings):
- current language code (plain string)
- custom languages (JSON list of language objects)
- custom categories (JSON list of category objects)
- translation overrides (JSON object: language code -> category -> tree)

Reads never fail: missing or corrupt payloads read as empty with a warning.
"""

import json
from typing import Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.models import (
    Language,
    TranslationCategory,
    Translations,
    translations_from_dict,
    translations_to_dict,
)
from infrastructure.i18n.store import LocaleStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_languages_adapter = TypeAdapter(List[Language])
_categories_adapter = TypeAdapter(List[TranslationCategory])


class LocalePersistence:
    """Reads and writes locale state through a LocaleStore.

    Attributes:
        store: Underlying key-value store.
        settings: I18nSettings providing the store keys.
    """

    def __init__(self, store: LocaleStore, settings: I18nSettings):
        self.store = store
        self.settings = settings

    # Current language

    def read_language(self) -> Optional[str]:
        """Get the persisted language code, or None."""
        return self.store.get(self.settings.LANGUAGE_STORAGE_KEY) or None

    def write_language(self, code: str) -> None:
        self.store.set(self.settings.LANGUAGE_STORAGE_KEY, code)

    def clear_language(self) -> None:
        self.store.remove(self.settings.LANGUAGE_STORAGE_KEY)

    # Custom languages

    def read_custom_languages(self) -> List[Language]:
        """Get runtime-added languages.

        Returns:
            List of Language; empty when nothing is stored or the payload
            is corrupt.
        """
        raw = self.store.get(self.settings.CUSTOM_LANGUAGES_STORAGE_KEY)
        if not raw:
            return []
        try:
            return _languages_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "stored_custom_languages_unreadable",
                key=self.settings.CUSTOM_LANGUAGES_STORAGE_KEY,
                error=str(e),
            )
            return []

    def write_custom_languages(self, languages: List[Language]) -> None:
        payload = _languages_adapter.dump_json(languages, by_alias=True)
        self.store.set(
            self.settings.CUSTOM_LANGUAGES_STORAGE_KEY, payload.decode("utf-8")
        )

    # Custom categories

    def read_custom_categories(self) -> List[TranslationCategory]:
        """Get runtime-added categories (empty on missing/corrupt payload)."""
        raw = self.store.get(self.settings.CUSTOM_CATEGORIES_STORAGE_KEY)
        if not raw:
            return []
        try:
            return _categories_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "stored_custom_categories_unreadable",
                key=self.settings.CUSTOM_CATEGORIES_STORAGE_KEY,
                error=str(e),
            )
            return []

    def write_custom_categories(self, categories: List[TranslationCategory]) -> None:
        payload = _categories_adapter.dump_json(categories, exclude_none=True)
        self.store.set(
            self.settings.CUSTOM_CATEGORIES_STORAGE_KEY, payload.decode("utf-8")
        )

    # Translation overrides

    def read_overrides(self) -> Dict[str, Translations]:
        """Get persisted translation overrides for every language.

        Language entries that are not valid trees are skipped.

        Returns:
            Mapping of language code to Translations.
        """
        raw = self.store.get(self.settings.TRANSLATIONS_STORAGE_KEY)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(
                "stored_translations_unreadable",
                key=self.settings.TRANSLATIONS_STORAGE_KEY,
                error=str(e),
            )
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "stored_translations_invalid",
                key=self.settings.TRANSLATIONS_STORAGE_KEY,
                expected="object",
            )
            return {}

        overrides: Dict[str, Translations] = {}
        for code, categories in data.items():
            if not isinstance(categories, dict):
                logger.warning("stored_translations_language_invalid", language=code)
                continue
            try:
                overrides[code] = translations_from_dict(categories)
            except ValueError as e:
                logger.warning(
                    "stored_translations_language_invalid",
                    language=code,
                    error=str(e),
                )
        return overrides

    def read_language_overrides(self, code: str) -> Optional[Translations]:
        """Get persisted overrides of one language, or None."""
        return self.read_overrides().get(code)

    def write_overrides(self, overrides: Dict[str, Translations]) -> None:
        payload = {
            code: translations_to_dict(translations)
            for code, translations in overrides.items()
        }
        self.store.set(
            self.settings.TRANSLATIONS_STORAGE_KEY,
            json.dumps(payload, ensure_ascii=False),
        )
