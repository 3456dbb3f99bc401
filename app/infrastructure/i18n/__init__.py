"""i18n system - translation engine for the marketing site.

Provides the built-in catalog, key resolution with fallback and
interpolation, and runtime extension of languages, translations and
categories persisted through a key-value store.

Main components:
- models: Language, TranslationCategory, Leaf/Branch translation tree
- loader: TranslationLoader and YAMLTranslationLoader
- catalog: immutable built-in TranslationCatalog
- translator: Translator with fallback lookup and {{param}} interpolation
- resolvers: LocaleResolver and environment language detection
- store/persistence: LocaleStore implementations and typed persistence
- manager: LocaleManager owning the active language
- service: TranslationService consumer facade
"""

from infrastructure.i18n.catalog import TranslationCatalog
from infrastructure.i18n.exceptions import (
    BuiltinProtectedError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    DuplicateLanguageError,
    I18nError,
    I18nErrorKind,
    I18nErrorState,
    InitializationError,
    InvalidLanguageError,
    TranslationsNotFoundError,
    UnsupportedLanguageError,
)
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.manager import LocaleManager
from infrastructure.i18n.models import (
    Branch,
    Language,
    LanguageData,
    Leaf,
    LocalePhase,
    MergeStrategy,
    TranslationCategory,
    TranslationNode,
    Translations,
)
from infrastructure.i18n.persistence import LocalePersistence
from infrastructure.i18n.resolvers import LocaleResolver, environment_language
from infrastructure.i18n.service import CategoryTranslator, TranslationService
from infrastructure.i18n.store import (
    InMemoryLocaleStore,
    JSONFileLocaleStore,
    LocaleStore,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "Branch",
    "BuiltinProtectedError",
    "CategoryNotFoundError",
    "CategoryTranslator",
    "DuplicateCategoryError",
    "DuplicateLanguageError",
    "I18nError",
    "I18nErrorKind",
    "I18nErrorState",
    "InMemoryLocaleStore",
    "InitializationError",
    "InvalidLanguageError",
    "JSONFileLocaleStore",
    "Language",
    "LanguageData",
    "Leaf",
    "LocaleManager",
    "LocalePersistence",
    "LocalePhase",
    "LocaleResolver",
    "LocaleStore",
    "MergeStrategy",
    "TranslationCatalog",
    "TranslationCategory",
    "TranslationLoader",
    "TranslationNode",
    "TranslationService",
    "Translations",
    "TranslationsNotFoundError",
    "Translator",
    "UnsupportedLanguageError",
    "YAMLTranslationLoader",
    "environment_language",
]
