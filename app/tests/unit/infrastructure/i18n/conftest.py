"""Feature-level fixtures for i18n system tests.

Provides catalogs, stores and managers for translation and locale
management scenarios.
"""

import pytest

from infrastructure.i18n import (
    LocaleManager,
    LocalePersistence,
    Translator,
    YAMLTranslationLoader,
)
from tests.factories.i18n import make_catalog, write_locales_dir


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary catalog directory.

    Returns a directory structure like:
    - languages.yml (en, fr, de)
    - categories.yml (nav, common, services)
    - site.en.yml / pages.en.yml
    - site.fr.yml / pages.fr.yml
    """
    return write_locales_dir(tmp_path / "locales")


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def catalog():
    """In-memory catalog: en and fr translated, de declared only."""
    return make_catalog()


@pytest.fixture
def translator(catalog):
    """Translator falling back to English."""
    return Translator(catalog, fallback_language="en", log_missing_keys=True)


@pytest.fixture
def persistence(memory_store, i18n_settings):
    """LocalePersistence over the in-memory store."""
    return LocalePersistence(memory_store, i18n_settings)


@pytest.fixture
def manager(catalog, memory_store, i18n_settings):
    """Uninitialized LocaleManager with no environment preference."""
    return LocaleManager(
        catalog=catalog,
        store=memory_store,
        settings=i18n_settings,
        preferred_language=lambda: None,
    )
