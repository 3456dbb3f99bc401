"""Immutable built-in translation catalog."""

from typing import Dict, Iterable, List, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    Language,
    LanguageData,
    TranslationCategory,
    Translations,
)


class TranslationCatalog:
    """Built-in languages, categories and translation trees.

    The catalog is built once and never modified. Some declared languages
    may ship no translations (they are selectable only once custom
    translations are added for them).

    Attributes:
        languages: Every built-in language, in declaration order.
        categories: Every built-in category, in declaration order.
    """

    def __init__(
        self,
        languages: Iterable[Language],
        categories: Iterable[TranslationCategory],
        entries: Dict[str, LanguageData],
    ):
        self._languages = tuple(languages)
        self._categories = tuple(categories)
        self._entries = dict(entries)

    @classmethod
    def from_loader(cls, loader: TranslationLoader) -> "TranslationCatalog":
        """Build a catalog from a loader.

        Args:
            loader: TranslationLoader providing languages, categories and trees.

        Returns:
            TranslationCatalog instance.
        """
        return cls(
            languages=loader.load_languages(),
            categories=loader.load_categories(),
            entries=loader.load_all(),
        )

    @property
    def languages(self) -> List[Language]:
        return list(self._languages)

    @property
    def categories(self) -> List[TranslationCategory]:
        return list(self._categories)

    @property
    def codes(self) -> List[str]:
        """Codes of the languages that ship translations."""
        return list(self._entries)

    def get(self, code: str) -> Optional[LanguageData]:
        """Get the built-in entry for a language, or None."""
        return self._entries.get(code)

    def translations_for(self, code: str) -> Optional[Translations]:
        """Get a copy of a language's built-in translations, or None.

        The copy is shallow: category trees are immutable Branches.
        """
        entry = self._entries.get(code)
        return dict(entry.translations) if entry else None

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)
