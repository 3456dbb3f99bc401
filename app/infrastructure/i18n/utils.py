"""Helpers for walking, updating and merging translation trees.

All tree updates are copy-on-write: the input Branch is never modified.
"""

import re
from typing import Dict, List, Mapping, Optional, Sequence, Union

from infrastructure.i18n.models import (
    Branch,
    Language,
    Leaf,
    MergeStrategy,
    TranslationCategory,
    TranslationNode,
    Translations,
)

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")

# Region separators seen in browser tags ("en-US") and POSIX locales ("en_US.UTF-8")
_REGION_SEPARATORS = re.compile(r"[-_.@]")


def get_nested_value(node: TranslationNode, path: str) -> Optional[TranslationNode]:
    """Walk a dot-separated path through a translation tree.

    Args:
        node: Root node (normally a category Branch).
        path: Dot-separated key path (e.g., "hero.title").

    Returns:
        The Leaf or Branch at path, or None when a step is missing or
        lands on a leaf before the path is exhausted.
    """
    current: Optional[TranslationNode] = node
    for key in path.split("."):
        if not isinstance(current, Branch):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def set_nested_value(branch: Branch, path: str, value: str) -> Branch:
    """Return a copy of branch with a leaf written at path.

    Missing intermediate nodes are created. An intermediate leaf is
    replaced by a branch.

    Args:
        branch: Tree to update.
        path: Dot-separated key path.
        value: Leaf value.

    Returns:
        New Branch with the value written.
    """
    key, _, rest = path.partition(".")
    children = dict(branch.children)
    if not rest:
        children[key] = Leaf(value)
    else:
        child = children.get(key)
        if not isinstance(child, Branch):
            child = Branch()
        children[key] = set_nested_value(child, rest, value)
    return Branch(children=children)


def remove_nested_value(branch: Branch, path: str) -> Branch:
    """Return a copy of branch without the node at path.

    Branches emptied by the removal are pruned, except the root itself.

    Args:
        branch: Tree to update.
        path: Dot-separated key path.

    Returns:
        New Branch, or the same branch when path does not exist.
    """
    key, _, rest = path.partition(".")
    if key not in branch:
        return branch

    children = dict(branch.children)
    if not rest:
        del children[key]
        return Branch(children=children)

    child = children[key]
    if not isinstance(child, Branch):
        return branch

    updated = remove_nested_value(child, rest)
    if updated is child:
        return branch
    if len(updated):
        children[key] = updated
    else:
        del children[key]
    return Branch(children=children)


def format_translation(
    template: str, params: Optional[Mapping[str, Union[str, int, float]]] = None
) -> str:
    """Interpolate {{name}} placeholders.

    Placeholders without a matching parameter are left verbatim.

    Args:
        template: Message with {{name}} placeholders.
        params: Parameter values.

    Returns:
        Interpolated message.
    """
    if not params:
        return template

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def merge_branches(base: Branch, override: Branch) -> Branch:
    """Merge override into base at every depth.

    A leaf on either side replaces whatever the other side holds.
    """
    children = dict(base.children)
    for key, node in override.items():
        existing = children.get(key)
        if isinstance(existing, Branch) and isinstance(node, Branch):
            children[key] = merge_branches(existing, node)
        else:
            children[key] = node
    return Branch(children=children)


def merge_translations(
    base: Translations,
    override: Translations,
    strategy: MergeStrategy = MergeStrategy.RECURSIVE,
) -> Translations:
    """Layer override translations over base translations.

    Args:
        base: Built-in translations.
        override: Persisted custom translations.
        strategy: CATEGORY replaces top-level keys of each category;
            RECURSIVE merges nested branches too.

    Returns:
        New Translations mapping. Inputs are not modified.
    """
    result: Translations = dict(base)
    for category, tree in override.items():
        existing = result.get(category)
        if existing is None:
            result[category] = tree
        elif strategy == MergeStrategy.CATEGORY:
            result[category] = Branch(children={**existing.children, **tree.children})
        else:
            result[category] = merge_branches(existing, tree)
    return result


def extract_translation_keys(translations: Translations) -> Dict[str, List[str]]:
    """List every leaf dot-path per category.

    Args:
        translations: Translations to scan.

    Returns:
        Mapping of category id to its leaf key paths, in tree order.
    """
    keys: Dict[str, List[str]] = {}

    def _walk(branch: Branch, prefix: str, collected: List[str]) -> None:
        for key, node in branch.items():
            full_key = f"{prefix}.{key}" if prefix else key
            if isinstance(node, Leaf):
                collected.append(full_key)
            else:
                _walk(node, full_key, collected)

    for category, tree in translations.items():
        keys[category] = []
        _walk(tree, "", keys[category])

    return keys


def validate_language(language: Language) -> List[str]:
    """Validate a language definition.

    Args:
        language: Language to check.

    Returns:
        Every violation found; empty when valid.
    """
    errors = []

    if not language.code or len(language.code) < 2:
        errors.append("Language code must be at least 2 characters")

    if not language.name:
        errors.append("Language name is required")

    if not language.native_name:
        errors.append("Native name is required")

    return errors


def validate_translations(
    translations: Translations, categories: Sequence[TranslationCategory]
) -> List[str]:
    """Report categories that have no translation tree.

    Args:
        translations: Translations to check.
        categories: Categories every language is expected to cover.

    Returns:
        One message per missing category.
    """
    return [
        f"Missing category: {category.id}"
        for category in categories
        if category.id not in translations
    ]


def is_supported_language(code: str, languages: Sequence[Language]) -> bool:
    """Check if a language code is among languages."""
    return any(language.code == code for language in languages)


def generate_language_id(name: str) -> str:
    """Derive a short language id from a display name.

    Example:
        >>> generate_language_id("Klingon (tlhIngan)")
        'kling'
    """
    return re.sub(r"[^a-z0-9]", "", name.lower())[:5]


def language_from_tag(tag: Optional[str]) -> Optional[str]:
    """Reduce a language tag to its language part.

    Example:
        >>> language_from_tag("en-US")
        'en'
        >>> language_from_tag("fr_CA.UTF-8")
        'fr'
    """
    if not tag:
        return None
    language = _REGION_SEPARATORS.split(tag.strip(), maxsplit=1)[0].lower()
    return language or None
