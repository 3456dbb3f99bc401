"""Translation loading interface and implementations.

Defines the contract for loading the built-in catalog and provides the
YAML-based loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import structlog
import yaml

from infrastructure.i18n.models import (
    Branch,
    Language,
    LanguageData,
    TranslationCategory,
    Translations,
)

logger = structlog.get_logger()

LANGUAGES_FILE = "languages.yml"
CATEGORIES_FILE = "categories.yml"


class TranslationLoader(ABC):
    """Abstract base for built-in catalog loaders.

    Implementations must define how to load language metadata, categories
    and the translation trees of each language.
    """

    @abstractmethod
    def load_languages(self) -> List[Language]:
        """Load metadata of every built-in language.

        Returns:
            Built-in languages in declaration order.
        """
        pass

    @abstractmethod
    def load_categories(self) -> List[TranslationCategory]:
        """Load the built-in translation categories.

        Returns:
            Built-in categories in declaration order.
        """
        pass

    @abstractmethod
    def load(self, code: str) -> Translations:
        """Load translations for a specific language.

        Args:
            code: Language code to load translations for.

        Returns:
            Translations keyed by category id.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, LanguageData]:
        """Load translations for every built-in language that ships them.

        Returns:
            Dict mapping language code to LanguageData.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based catalog files.

    Expects in the translations directory:
    - languages.yml: list of language definitions
    - categories.yml: list of category definitions
    - <domain>.<code>.yml: {category: {key: message}} trees, merged per code

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded translations by language code.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded translations in memory.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Translations] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load_languages(self) -> List[Language]:
        """Load built-in language metadata from languages.yml.

        Returns:
            List of Language.

        Raises:
            FileNotFoundError: If languages.yml is missing.
            ValueError: If the file is not a list of language mappings.
        """
        entries = self._read_list(LANGUAGES_FILE)
        return [Language.model_validate(entry) for entry in entries]

    def load_categories(self) -> List[TranslationCategory]:
        """Load built-in categories from categories.yml.

        Returns:
            List of TranslationCategory.

        Raises:
            FileNotFoundError: If categories.yml is missing.
            ValueError: If the file is not a list of category mappings.
        """
        entries = self._read_list(CATEGORIES_FILE)
        return [TranslationCategory.model_validate(entry) for entry in entries]

    def load(self, code: str) -> Translations:
        """Load translations for a language from YAML files.

        Searches for files matching pattern: *.<code>.yml
        Merges all matching files into a single Translations mapping.

        Args:
            code: Language code to load.

        Returns:
            Translations keyed by category id.

        Raises:
            FileNotFoundError: If no YAML files found for the language.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and code in self.cache:
            logger.debug("loaded_from_cache", language=code)
            return self.cache[code]

        yaml_files = sorted(self.translations_dir.glob(f"*.{code}.yml"))

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for language {code} in {self.translations_dir}"
            )

        translations: Translations = {}
        for yaml_file in yaml_files:
            data = self._read_yaml(yaml_file)
            if data:
                self._merge_yaml_data(translations, data, yaml_file)

        logger.info(
            "loaded_translations",
            language=code,
            file_count=len(yaml_files),
            category_count=len(translations),
        )

        if self.use_cache:
            self.cache[code] = translations

        return translations

    def load_all(self) -> Dict[str, LanguageData]:
        """Load translations for every built-in language.

        Detects available languages from *.<code>.yml files. Codes that are
        not declared in languages.yml are skipped.

        Returns:
            Dict mapping each language code to its LanguageData.

        Raises:
            ValueError: If no translation files found at all.
        """
        languages = {language.code: language for language in self.load_languages()}

        codes_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # Extract code from filename (e.g., "site.en.yml" -> "en")
            parts = yaml_file.stem.split(".")
            if len(parts) < 2:
                continue
            code = parts[-1]
            if code in languages:
                codes_found.add(code)
            else:
                logger.warning(
                    "skipped_undeclared_language_file",
                    file=str(yaml_file),
                    language=code,
                )

        if not codes_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for code in sorted(codes_found):
            try:
                result[code] = LanguageData(
                    meta=languages[code], translations=self.load(code)
                )
            except FileNotFoundError:
                logger.warning("could_not_load_language", language=code)

        return result

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    def _read_yaml(self, yaml_file: Path) -> Any:
        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

    def _read_list(self, filename: str) -> List[Dict[str, Any]]:
        path = self.translations_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        data = self._read_yaml(path)
        if not isinstance(data, list) or not all(
            isinstance(entry, dict) for entry in data
        ):
            raise ValueError(f"{path} must contain a list of mappings")
        return data

    def _merge_yaml_data(
        self,
        translations: Translations,
        data: Any,
        source_file: Path,
    ) -> None:
        """Merge YAML data into translations.

        Expected format:
        category:
          key1: message1
          nested:
            key2: message2

        Args:
            translations: Translations to merge into.
            data: Parsed YAML data.
            source_file: Source file (for logging).
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for category, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_category_format",
                    file=str(source_file),
                    category=category,
                    expected="dict",
                )
                continue

            try:
                tree = Branch.from_dict(messages)
            except ValueError as e:
                logger.warning(
                    "invalid_category_values",
                    file=str(source_file),
                    category=category,
                    error=str(e),
                )
                continue

            existing = translations.get(category)
            if existing is None:
                translations[category] = tree
            else:
                translations[category] = Branch(
                    children={**existing.children, **tree.children}
                )
