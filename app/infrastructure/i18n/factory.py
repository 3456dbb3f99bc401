"""Factory functions for creating i18n components.

Provides convenience functions for wiring the catalog, store, manager and
translation service with the application settings.
"""

from pathlib import Path
from typing import Callable, Optional

import structlog

from infrastructure.configuration import I18nSettings
from infrastructure.configuration import settings as app_settings
from infrastructure.i18n.catalog import TranslationCatalog
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.manager import LocaleManager
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.store import (
    InMemoryLocaleStore,
    JSONFileLocaleStore,
    LocaleStore,
)

logger = structlog.get_logger()

DEFAULT_LOCALES_DIR = Path(__file__).resolve().parent / "locales"


def create_catalog(
    locales_dir: Optional[Path] = None,
    use_cache: bool = True,
    settings: Optional[I18nSettings] = None,
) -> TranslationCatalog:
    """Load the built-in catalog.

    Args:
        locales_dir: Catalog directory (default: settings.LOCALES_DIR, then
            the packaged locales directory).
        use_cache: Whether the loader caches parsed YAML.
        settings: I18nSettings (default: application settings).

    Returns:
        TranslationCatalog

    Raises:
        ValueError: If the directory does not exist or holds no translations.
    """
    settings = settings or app_settings.i18n
    if locales_dir is None:
        locales_dir = (
            Path(settings.LOCALES_DIR) if settings.LOCALES_DIR else DEFAULT_LOCALES_DIR
        )

    loader = YAMLTranslationLoader(translations_dir=locales_dir, use_cache=use_cache)
    catalog = TranslationCatalog.from_loader(loader)
    logger.info(
        "catalog_created",
        locales_dir=str(locales_dir),
        language_count=len(catalog.languages),
        translated_language_count=len(catalog),
    )
    return catalog


def create_store(
    path: Optional[Path] = None,
    settings: Optional[I18nSettings] = None,
) -> LocaleStore:
    """Create the locale store.

    Args:
        path: JSON file for a file-backed store (default: settings.STORE_PATH).
        settings: I18nSettings (default: application settings).

    Returns:
        JSONFileLocaleStore when a path is configured, InMemoryLocaleStore
        otherwise.
    """
    settings = settings or app_settings.i18n
    if path is None and settings.STORE_PATH:
        path = Path(settings.STORE_PATH)

    if path is not None:
        return JSONFileLocaleStore(path)
    return InMemoryLocaleStore()


def create_locale_manager(
    catalog: Optional[TranslationCatalog] = None,
    store: Optional[LocaleStore] = None,
    settings: Optional[I18nSettings] = None,
    preferred_language: Optional[Callable[[], Optional[str]]] = None,
) -> LocaleManager:
    """Create an uninitialized LocaleManager.

    Args:
        catalog: Built-in catalog (default: create_catalog()).
        store: Locale store (default: create_store()).
        settings: I18nSettings (default: application settings).
        preferred_language: Environment language provider.

    Returns:
        LocaleManager; await initialize() before use.
    """
    settings = settings or app_settings.i18n
    return LocaleManager(
        catalog=catalog if catalog is not None else create_catalog(settings=settings),
        store=store if store is not None else create_store(settings=settings),
        settings=settings,
        preferred_language=preferred_language,
    )


async def create_translation_service(
    catalog: Optional[TranslationCatalog] = None,
    store: Optional[LocaleStore] = None,
    settings: Optional[I18nSettings] = None,
    preferred_language: Optional[Callable[[], Optional[str]]] = None,
) -> TranslationService:
    """Create a TranslationService over an initialized LocaleManager.

    Usage:
        service = await create_translation_service()
        service.translate("save")

    Returns:
        TranslationService
    """
    manager = create_locale_manager(
        catalog=catalog,
        store=store,
        settings=settings,
        preferred_language=preferred_language,
    )
    await manager.initialize()
    return TranslationService(manager)
