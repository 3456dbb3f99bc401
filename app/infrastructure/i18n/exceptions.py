"""Custom exceptions for the i18n system.

Write-path operations (adding or removing languages, translations and
categories) raise these; the read path never does.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class I18nErrorKind(str, Enum):
    """Machine-readable error kinds mirrored into the manager's error state."""

    UNSUPPORTED_LANGUAGE = "unsupported_language"
    TRANSLATIONS_NOT_FOUND = "translations_not_found"
    INVALID_LANGUAGE = "invalid_language"
    DUPLICATE_LANGUAGE = "duplicate_language"
    DUPLICATE_CATEGORY = "duplicate_category"
    CATEGORY_NOT_FOUND = "category_not_found"
    BUILTIN_PROTECTED = "builtin_protected"
    INITIALIZATION_FAILURE = "initialization_failure"


@dataclass(frozen=True)
class I18nErrorState:
    """Queryable error state exposed by LocaleManager.error.

    Attributes:
        kind: Error kind.
        message: Human-friendly message suitable for display.
    """

    kind: I18nErrorKind
    message: str


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            await manager.add_language(language, translations)
        except I18nError as e:
            logger.error("i18n_error", kind=e.kind.value, error=str(e))
    """

    kind: I18nErrorKind = I18nErrorKind.INITIALIZATION_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_state(self) -> I18nErrorState:
        """Convert to the error state stored on the manager."""
        return I18nErrorState(kind=self.kind, message=self.message)


class UnsupportedLanguageError(I18nError):
    """Raised when a language code is not among the available languages.

    Example:
        >>> await manager.add_translation("common", "save", "Save", "zz")
        Traceback (most recent call last):
        ...
        UnsupportedLanguageError: Unsupported language: zz
    """

    kind = I18nErrorKind.UNSUPPORTED_LANGUAGE

    def __init__(self, code: str):
        super().__init__(f"Unsupported language: {code}")
        self.code = code


class TranslationsNotFoundError(I18nError):
    """Raised when a language has neither built-in nor persisted translations."""

    kind = I18nErrorKind.TRANSLATIONS_NOT_FOUND

    def __init__(self, code: str):
        super().__init__(f"Translations not found for language: {code}")
        self.code = code


class InvalidLanguageError(I18nError):
    """Raised when a language fails validation.

    Attributes:
        errors: Every validation violation found.
    """

    kind = I18nErrorKind.INVALID_LANGUAGE

    def __init__(self, errors: List[str]):
        super().__init__(f"Invalid language: {', '.join(errors)}")
        self.errors = list(errors)


class DuplicateLanguageError(I18nError):
    """Raised when adding a language whose code already exists."""

    kind = I18nErrorKind.DUPLICATE_LANGUAGE

    def __init__(self, code: str):
        super().__init__(f"Language already exists: {code}")
        self.code = code


class DuplicateCategoryError(I18nError):
    """Raised when adding a category whose id already exists."""

    kind = I18nErrorKind.DUPLICATE_CATEGORY

    def __init__(self, category_id: str):
        super().__init__(f"Category already exists: {category_id}")
        self.category_id = category_id


class CategoryNotFoundError(I18nError):
    """Raised when removing a category that does not exist."""

    kind = I18nErrorKind.CATEGORY_NOT_FOUND

    def __init__(self, category_id: str):
        super().__init__(f"Category not found: {category_id}")
        self.category_id = category_id


class BuiltinProtectedError(I18nError):
    """Raised when trying to remove a built-in language or category."""

    kind = I18nErrorKind.BUILTIN_PROTECTED

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"Built-in {resource} cannot be removed: {identifier}")
        self.resource = resource
        self.identifier = identifier


class InitializationError(I18nError):
    """Recorded when initialization had to fall back to the fallback language."""

    kind = I18nErrorKind.INITIALIZATION_FAILURE

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause
