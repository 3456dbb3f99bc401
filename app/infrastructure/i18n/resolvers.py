"""Language resolution logic for determining the initial language.

Provides strategies for picking a language from the persisted choice, the
hosting environment's preference (POSIX locale variables) and the
configured default.
"""

import os
from typing import Mapping, Optional, Sequence

import structlog

from infrastructure.i18n.models import Language
from infrastructure.i18n.utils import is_supported_language, language_from_tag

logger = structlog.get_logger().bind(component="i18n.resolver")

# Checked in order, the way gettext does
LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def environment_language(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Read the preferred language of the hosting environment.

    Args:
        environ: Environment mapping (defaults to os.environ).

    Returns:
        Language code (e.g., "fr" for "fr_CA.UTF-8"), or None when unset.
        "C" and "POSIX" locales count as unset.
    """
    environ = os.environ if environ is None else environ
    for name in LOCALE_ENV_VARS:
        value = environ.get(name)
        if not value:
            continue
        # LANGUAGE may hold a colon-separated priority list
        first = value.split(":")[0]
        if first.upper() in ("C", "POSIX") or first.upper().startswith("C."):
            continue
        code = language_from_tag(first)
        if code:
            return code
    return None


class LocaleResolver:
    """Resolves the language to activate from various context sources.

    Implements the fallback chain for the initial language:
    1. Persisted language choice
    2. Environment preference (POSIX locale variables)
    3. Default language
    """

    def __init__(self, default_language: str = "en"):
        """Initialize locale resolver.

        Args:
            default_language: Fallback language code when no preference found.
        """
        self.default_language = default_language
        self.log = logger.bind(default_language=default_language)

    def resolve_initial(
        self,
        stored_language: Optional[str],
        preferred_language: Optional[str],
        available_languages: Sequence[Language],
    ) -> str:
        """Pick the initial language.

        Args:
            stored_language: Persisted language choice, if any.
            preferred_language: Environment preference tag (e.g., "en-US").
            available_languages: Built-in and custom languages.

        Returns:
            Language code.
        """
        if stored_language and is_supported_language(
            stored_language, available_languages
        ):
            self.log.debug("resolved_from_store", language=stored_language)
            return stored_language

        preferred = language_from_tag(preferred_language)
        if preferred and is_supported_language(preferred, available_languages):
            self.log.debug("resolved_from_environment", language=preferred)
            return preferred

        return self.default_language
