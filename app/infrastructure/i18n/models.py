"""Translation models for i18n system.

Defines core data structures for languages, categories and the nested
translation tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Base model for catalog definitions (languages, categories).

    Accepts both field names and camelCase aliases, strips whitespace and
    validates on assignment.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        str_strip_whitespace=True,
    )


class Language(CatalogModel):
    """A language the site can be displayed in.

    Serialized with camelCase aliases (``nativeName``) so persisted payloads
    stay readable by the browser front-end.

    Attributes:
        code: Unique language code (e.g., "en", "fr"). At least 2 characters.
        name: English name of the language.
        native_name: Name of the language in that language.
        flag: Flag emoji shown next to the language.
        rtl: True for right-to-left scripts.
    """

    code: str
    name: str = ""
    native_name: str = Field(default="", alias="nativeName")
    flag: str = ""
    rtl: bool = False


class TranslationCategory(CatalogModel):
    """A namespace partition of the translation tree (e.g., "nav", "common").

    Attributes:
        id: Unique category identifier.
        name: Human readable category name.
        description: Optional description of what the category holds.
    """

    id: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Leaf:
    """Terminal string value of a translation tree."""

    value: str


@dataclass(frozen=True)
class Branch:
    """Nested mapping of translation keys to child nodes.

    Branches are immutable: children are held in a read-only mapping and
    every update produces a new Branch (see infrastructure.i18n.utils).

    Attributes:
        children: Read-only mapping of key -> Leaf or Branch.
    """

    children: Mapping[str, "TranslationNode"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def get(self, key: str) -> Optional["TranslationNode"]:
        """Return the child node for key, or None if absent."""
        return self.children.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def items(self) -> Iterator[Tuple[str, "TranslationNode"]]:
        """Iterate over (key, node) pairs."""
        return iter(self.children.items())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Branch":
        """Build a Branch from a plain nested mapping.

        Strings become leaves, mappings become branches. Other scalars
        (numbers from YAML, for example) are converted with str().

        Args:
            data: Nested mapping as read from YAML, JSON or caller input.

        Returns:
            Branch instance.

        Raises:
            ValueError: If a value is None or a list.
        """
        children: Dict[str, TranslationNode] = {}
        for key, value in data.items():
            if isinstance(value, (Branch, Leaf)):
                children[str(key)] = value
            elif isinstance(value, Mapping):
                children[str(key)] = cls.from_dict(value)
            elif value is None or isinstance(value, (list, tuple)):
                raise ValueError(
                    f"Translation value for '{key}' must be a string or mapping"
                )
            else:
                children[str(key)] = Leaf(str(value))
        return cls(children=children)

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to a plain nested dict of strings."""
        result: Dict[str, Any] = {}
        for key, node in self.children.items():
            result[key] = node.value if isinstance(node, Leaf) else node.to_dict()
        return result


TranslationNode = Union[Leaf, Branch]

# Category id -> translation tree
Translations = Dict[str, Branch]


def translations_from_dict(data: Mapping[str, Any]) -> Translations:
    """Convert a plain {category: {...}} mapping into Translations.

    Args:
        data: Mapping of category id to nested mapping.

    Returns:
        Translations keyed by category id.

    Raises:
        ValueError: If a category value is not a mapping.
    """
    translations: Translations = {}
    for category, tree in data.items():
        if isinstance(tree, Branch):
            translations[category] = tree
        elif isinstance(tree, Mapping):
            translations[category] = Branch.from_dict(tree)
        else:
            raise ValueError(f"Category '{category}' must map to a nested mapping")
    return translations


def translations_to_dict(translations: Translations) -> Dict[str, Dict[str, Any]]:
    """Convert Translations into a plain JSON-serializable dict."""
    return {category: tree.to_dict() for category, tree in translations.items()}


@dataclass(frozen=True)
class LanguageData:
    """Built-in unit of the catalog: language metadata and its translations.

    Attributes:
        meta: Language metadata.
        translations: Full translation tree for the language.
    """

    meta: Language
    translations: Translations


class LocalePhase(str, Enum):
    """Lifecycle phase of a LocaleManager.

    FAILED is still usable: the manager serves the fallback language.
    """

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class MergeStrategy(str, Enum):
    """How persisted overrides are layered over built-in translations.

    CATEGORY merges one level deep inside each category: an override for
    ``services.process.title`` replaces the whole ``process`` object.
    RECURSIVE merges branches at every depth.
    """

    CATEGORY = "category"
    RECURSIVE = "recursive"
