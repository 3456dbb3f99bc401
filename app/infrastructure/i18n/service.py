"""Translation service for dependency injection.

Provides the thin consumer-facing accessor over a LocaleManager.
"""

from typing import Optional, Union

from infrastructure.i18n.manager import LocaleManager
from infrastructure.i18n.models import Branch
from infrastructure.i18n.translator import Params


class TranslationService:
    """Class-based translation facade.

    This is a thin facade - all actual work is delegated to the underlying
    LocaleManager, which callers construct and initialize themselves (or via
    infrastructure.i18n.factory.create_translation_service).

    Usage:
        service = TranslationService(manager)
        service.translate("save")                       # "common" category
        service.translate("home", category="nav")
        service.translate("greeting", params={"name": "Ada"})

        nav = service.for_category("nav")
        nav.t("contact")
    """

    def __init__(self, manager: LocaleManager, default_category: Optional[str] = None):
        """Initialize translation service.

        Args:
            manager: LocaleManager providing the active translations.
            default_category: Category used when translate() gets none
                (default: the manager's settings.DEFAULT_CATEGORY).
        """
        self._manager = manager
        self.default_category = default_category or manager.settings.DEFAULT_CATEGORY

    def translate(
        self,
        key: str,
        category: Optional[str] = None,
        params: Optional[Params] = None,
    ) -> Union[str, Branch]:
        """Resolve a key in the active language.

        Args:
            key: Dot-separated key path.
            category: Category id (default: self.default_category).
            params: Optional values for {{name}} placeholders.

        Returns:
            Translated string, or the raw key when missing.
        """
        return self._manager.translate(key, category or self.default_category, params)

    t = translate

    def for_category(self, category: str) -> "CategoryTranslator":
        """Get a translator scoped to one category."""
        return CategoryTranslator(self, category)

    @property
    def current_language(self) -> str:
        return self._manager.current_language

    @property
    def manager(self) -> LocaleManager:
        """Access underlying LocaleManager instance."""
        return self._manager


class CategoryTranslator:
    """Translator bound to a default category (one per page or section).

    Attributes:
        category: Category used when t() gets none.
    """

    def __init__(self, service: TranslationService, category: str):
        self._service = service
        self.category = category

    def t(
        self,
        key: str,
        params: Optional[Params] = None,
        category: Optional[str] = None,
    ) -> Union[str, Branch]:
        return self._service.translate(key, category or self.category, params)
