"""Translation service for resolving and interpolating translated messages.

Read path of the i18n system: lookups never raise. Missing categories and
keys degrade to the raw key so rendering keeps working.
"""

from typing import Mapping, Optional, Union

from infrastructure.i18n.catalog import TranslationCatalog
from infrastructure.i18n.models import Branch, Leaf, Translations
from infrastructure.i18n.utils import format_translation, get_nested_value
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()

Params = Mapping[str, Union[str, int, float]]


class Translator:
    """Resolves dot-path keys against a translation tree.

    Falls back to the fallback language's built-in catalog entry (never to
    persisted overrides) when the active tree lacks a key.

    Attributes:
        catalog: Built-in TranslationCatalog.
        fallback_language: Language code consulted for missing keys.
        log_missing_keys: Whether to emit a diagnostic for missing keys.
    """

    def __init__(
        self,
        catalog: TranslationCatalog,
        fallback_language: str = "en",
        log_missing_keys: bool = True,
    ):
        self.catalog = catalog
        self.fallback_language = fallback_language
        self.log_missing_keys = log_missing_keys

    def lookup(
        self, translations: Translations, category: str, key_path: str
    ) -> OperationResult:
        """Find the node for category/key_path.

        Args:
            translations: Active translations.
            category: Category id.
            key_path: Dot-separated key path.

        Returns:
            SUCCESS with the Leaf or Branch as data (message "found", or
            "fallback" when served by the fallback language), or NOT_FOUND
            with error_code "category_not_found" / "key_not_found".
        """
        tree = translations.get(category)
        if tree is None:
            return OperationResult.not_found(
                f"Translation category not found: {category}",
                error_code="category_not_found",
            )

        node = get_nested_value(tree, key_path)
        if node is not None:
            return OperationResult.success(data=node, message="found")

        fallback_node = self._lookup_fallback(category, key_path)
        if fallback_node is not None:
            return OperationResult.success(data=fallback_node, message="fallback")

        return OperationResult.not_found(
            f"Translation key not found: {category}.{key_path}",
            error_code="key_not_found",
        )

    def resolve(
        self,
        translations: Translations,
        category: str,
        key_path: str,
        params: Optional[Params] = None,
    ) -> Union[str, Branch]:
        """Resolve and interpolate a translated message.

        Args:
            translations: Active translations.
            category: Category id.
            key_path: Dot-separated key path.
            params: Optional values for {{name}} placeholders.

        Returns:
            The interpolated string, the raw key_path when nothing is found,
            or the Branch itself when key_path names a namespace.
        """
        result = self.lookup(translations, category, key_path)

        if not result.is_success:
            if self.log_missing_keys and result.error_code == "key_not_found":
                logger.warning(
                    "translation_key_not_found",
                    category=category,
                    key=key_path,
                    fallback_language=self.fallback_language,
                )
            return key_path

        if result.message == "fallback":
            logger.debug(
                "used_fallback_translation",
                category=category,
                key=key_path,
                fallback_language=self.fallback_language,
            )

        node = result.data
        if isinstance(node, Leaf):
            return format_translation(node.value, params) if params else node.value
        return node

    def _lookup_fallback(self, category: str, key_path: str):
        entry = self.catalog.get(self.fallback_language)
        if entry is None:
            return None
        tree = entry.translations.get(category)
        if tree is None:
            return None
        return get_nested_value(tree, key_path)
