"""Internationalization feature settings."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language used when no preference is found (default: en)
        I18N_FALLBACK_LANGUAGE: Language consulted for missing keys (default: en)
        I18N_DEFAULT_CATEGORY: Category used by translate() when none is given
        I18N_PERSIST_LANGUAGE: Persist the active language choice (default: True)
        I18N_LANGUAGE_STORAGE_KEY: Store key holding the active language code
        I18N_TRANSLATIONS_STORAGE_KEY: Store key holding per-language overrides
        I18N_CUSTOM_LANGUAGES_STORAGE_KEY: Store key holding runtime-added languages
        I18N_CUSTOM_CATEGORIES_STORAGE_KEY: Store key holding runtime-added categories
        I18N_MERGE_STRATEGY: "recursive" (default) or "category" (one level deep)
        I18N_LOG_MISSING_KEYS: Emit a diagnostic log for missing keys (default: True)
        I18N_LOCALES_DIR: Override the packaged built-in catalog directory
        I18N_STORE_PATH: JSON file used by the file-backed store

    Example:
        ```python
        from infrastructure.configuration import settings

        fallback = settings.i18n.FALLBACK_LANGUAGE
        if settings.i18n.PERSIST_LANGUAGE:
            # Write the active language to the store...
        ```
    """

    model_config = SettingsConfigDict(env_prefix="I18N_")

    DEFAULT_LANGUAGE: str = Field(
        default="en",
        description="Language used when neither the store nor the environment has one",
    )

    FALLBACK_LANGUAGE: str = Field(
        default="en",
        description="Built-in language consulted when a key is missing",
    )

    DEFAULT_CATEGORY: str = Field(
        default="common",
        description="Category used by translate() when the caller omits one",
    )

    PERSIST_LANGUAGE: bool = Field(
        default=True,
        description="Persist the active language choice in the store",
    )

    LANGUAGE_STORAGE_KEY: str = Field(default="bestitconsulting_language")

    TRANSLATIONS_STORAGE_KEY: str = Field(default="bestitconsulting_translations")

    CUSTOM_LANGUAGES_STORAGE_KEY: str = Field(
        default="bestitconsulting_custom_languages"
    )

    CUSTOM_CATEGORIES_STORAGE_KEY: str = Field(
        default="bestitconsulting_custom_categories"
    )

    MERGE_STRATEGY: Literal["recursive", "category"] = Field(
        default="recursive",
        description="How persisted overrides are merged over built-in translations",
    )

    LOG_MISSING_KEYS: bool = Field(
        default=True,
        description="Log a diagnostic event when a translation key is missing",
    )

    LOCALES_DIR: Optional[str] = Field(
        default=None,
        description="Directory with languages.yml, categories.yml and *.<code>.yml",
    )

    STORE_PATH: Optional[str] = Field(
        default=None,
        description="JSON file backing the locale store (in-memory when unset)",
    )
