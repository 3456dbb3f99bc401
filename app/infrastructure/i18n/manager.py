"""Locale manager: owns the active language and runtime extensions.

The manager keeps in-memory state (current language, available languages,
categories, active translations) in sync with a LocaleStore. Operations are
coroutines because they may perform store I/O; they are expected to be
awaited serially by a single owner and take no locks.

Error surface:
- set_language() never raises; it returns an OperationResult and records
  failures in `error`.
- add_*/remove_* raise I18nError subclasses and record them in `error`.
- initialize() never raises; failures fall back to the fallback language.
"""

from contextlib import contextmanager
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Union,
)

from infrastructure.configuration import I18nSettings
from infrastructure.configuration import settings as app_settings
from infrastructure.i18n.catalog import TranslationCatalog
from infrastructure.i18n.exceptions import (
    BuiltinProtectedError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    DuplicateLanguageError,
    I18nError,
    I18nErrorState,
    InitializationError,
    InvalidLanguageError,
    TranslationsNotFoundError,
    UnsupportedLanguageError,
)
from infrastructure.i18n.models import (
    Branch,
    Language,
    Leaf,
    LocalePhase,
    MergeStrategy,
    TranslationCategory,
    Translations,
    translations_from_dict,
)
from infrastructure.i18n.persistence import LocalePersistence
from infrastructure.i18n.resolvers import LocaleResolver, environment_language
from infrastructure.i18n.store import LocaleStore
from infrastructure.i18n.translator import Params, Translator
from infrastructure.i18n.utils import (
    extract_translation_keys,
    get_nested_value,
    is_supported_language,
    merge_translations,
    remove_nested_value,
    set_nested_value,
    validate_language,
    validate_translations,
)
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()


class LocaleManager:
    """Owns current-language state and the runtime language/category lists.

    Construct one instance per application root (or per test) and pass it
    to whatever renders translated content.

    Attributes:
        catalog: Built-in TranslationCatalog.
        persistence: LocalePersistence wrapping the store.
        translator: Translator used by translate().
        settings: I18nSettings in effect.
    """

    def __init__(
        self,
        catalog: TranslationCatalog,
        store: LocaleStore,
        settings: Optional[I18nSettings] = None,
        preferred_language: Optional[Callable[[], Optional[str]]] = None,
    ):
        """Initialize LocaleManager.

        Args:
            catalog: Built-in catalog.
            store: Store for persisted choice and custom data.
            settings: I18nSettings (default: application settings).
            preferred_language: Callable returning the environment's language
                tag (default: POSIX locale environment variables).
        """
        self.settings = settings or app_settings.i18n
        self.catalog = catalog
        self.persistence = LocalePersistence(store, self.settings)
        self.translator = Translator(
            catalog,
            fallback_language=self.settings.FALLBACK_LANGUAGE,
            log_missing_keys=self.settings.LOG_MISSING_KEYS,
        )
        self.preferred_language = preferred_language or environment_language
        self.merge_strategy = MergeStrategy(self.settings.MERGE_STRATEGY)

        self._default_language = self.settings.DEFAULT_LANGUAGE
        self._builtin_languages: List[Language] = catalog.languages
        self._builtin_categories: List[TranslationCategory] = catalog.categories

        self._current_language = self._default_language
        self._languages: List[Language] = list(self._builtin_languages)
        self._categories: List[TranslationCategory] = list(self._builtin_categories)
        self._translations: Translations = {}
        self._phase = LocalePhase.UNINITIALIZED
        self._error: Optional[I18nErrorState] = None

    # Read-only state

    @property
    def current_language(self) -> str:
        return self._current_language

    @property
    def available_languages(self) -> List[Language]:
        return list(self._languages)

    @property
    def categories(self) -> List[TranslationCategory]:
        return list(self._categories)

    @property
    def translations(self) -> Translations:
        return dict(self._translations)

    @property
    def phase(self) -> LocalePhase:
        return self._phase

    @property
    def is_loading(self) -> bool:
        return self._phase == LocalePhase.LOADING

    @property
    def error(self) -> Optional[I18nErrorState]:
        return self._error

    # Lifecycle

    async def initialize(
        self,
        default_language: Optional[str] = None,
        builtin_languages: Optional[Sequence[Language]] = None,
        builtin_categories: Optional[Sequence[TranslationCategory]] = None,
    ) -> None:
        """Load persisted state and activate the initial language.

        Priority for the initial language: persisted choice (if still
        available) -> environment preference (if supported) -> default.
        On failure the fallback language's built-in entry is activated and
        the failure is recorded in `error`.

        Args:
            default_language: Overrides settings.DEFAULT_LANGUAGE.
            builtin_languages: Overrides the catalog's language list.
            builtin_categories: Overrides the catalog's category list.
        """
        self._phase = LocalePhase.LOADING
        self._error = None

        if default_language:
            self._default_language = default_language
        if builtin_languages is not None:
            self._builtin_languages = list(builtin_languages)
        if builtin_categories is not None:
            self._builtin_categories = list(builtin_categories)

        try:
            self._languages = self._with_custom(
                self._builtin_languages,
                self.persistence.read_custom_languages(),
                key=lambda language: language.code,
            )
            self._categories = self._with_custom(
                self._builtin_categories,
                self.persistence.read_custom_categories(),
                key=lambda category: category.id,
            )

            stored_language = (
                self.persistence.read_language()
                if self.settings.PERSIST_LANGUAGE
                else None
            )
            initial = LocaleResolver(self._default_language).resolve_initial(
                stored_language, self.preferred_language(), self._languages
            )

            translations = self._load_translations(initial)
            if not translations:
                raise TranslationsNotFoundError(initial)

            self._current_language = initial
            self._translations = translations

            if self.settings.PERSIST_LANGUAGE:
                self.persistence.write_language(initial)

            self._phase = LocalePhase.READY
            logger.info(
                "i18n_initialized",
                language=initial,
                language_count=len(self._languages),
                category_count=len(self._categories),
            )
        except Exception as e:  # pylint: disable=broad-except
            # Initialization must always leave a usable language behind
            fallback = self.settings.FALLBACK_LANGUAGE
            self._current_language = fallback
            self._translations = self.catalog.translations_for(fallback) or {}
            self._error = InitializationError(str(e), cause=e).to_state()
            self._phase = LocalePhase.FAILED
            logger.error(
                "i18n_initialization_failed",
                error=str(e),
                fallback_language=fallback,
            )

    async def set_language(self, code: str) -> OperationResult:
        """Switch the active language.

        Built-in translations are merged with persisted overrides; the
        switch only happens when the result is non-empty. Failures leave the
        state unchanged and are recorded in `error`.

        Args:
            code: Language code to activate.

        Returns:
            SUCCESS with the code as data, or PERMANENT_ERROR with the error
            kind as error_code.
        """
        self._error = None
        previous_phase = self._phase
        self._phase = LocalePhase.LOADING

        try:
            if not is_supported_language(code, self._languages):
                raise UnsupportedLanguageError(code)

            translations = self._load_translations(code)
            if not translations:
                raise TranslationsNotFoundError(code)
        except I18nError as e:
            self._error = e.to_state()
            self._phase = previous_phase
            logger.warning(
                "language_change_failed",
                language=code,
                kind=e.kind.value,
                error=e.message,
            )
            return OperationResult.permanent_error(e.message, error_code=e.kind.value)

        previous_language = self._current_language
        self._current_language = code
        self._translations = translations
        self._phase = LocalePhase.READY

        if self.settings.PERSIST_LANGUAGE:
            self.persistence.write_language(code)

        logger.info("language_changed", language=code, previous=previous_language)
        return OperationResult.success(data=code, message=f"Language set to {code}")

    # Mutations

    async def add_language(
        self,
        language: Language,
        translations: Union[Translations, Mapping[str, Any]],
    ) -> None:
        """Register a custom language with its translations.

        Does not switch the active language.

        Args:
            language: Language definition.
            translations: {category: tree} for the new language.

        Raises:
            InvalidLanguageError: If the language (or its tree) is invalid.
            DuplicateLanguageError: If the code is already available.
        """
        with self._recording_errors("add_language"):
            errors = validate_language(language)
            if errors:
                raise InvalidLanguageError(errors)

            if is_supported_language(language.code, self._languages):
                raise DuplicateLanguageError(language.code)

            try:
                tree = translations_from_dict(translations)
            except ValueError as e:
                raise InvalidLanguageError([str(e)]) from e

            missing = validate_translations(tree, self._categories)
            if missing:
                logger.info(
                    "custom_language_missing_categories",
                    language=language.code,
                    missing=missing,
                )

            custom_languages = self.persistence.read_custom_languages()
            custom_languages.append(language)
            self.persistence.write_custom_languages(custom_languages)

            overrides = self.persistence.read_overrides()
            overrides[language.code] = tree
            self.persistence.write_overrides(overrides)

            self._languages.append(language)
            logger.info("custom_language_added", language=language.code)

    async def add_translation(
        self,
        category: str,
        key_path: str,
        value: str,
        language_code: Optional[str] = None,
    ) -> None:
        """Write a translation override.

        Always persisted; the active tree is updated too when language_code
        is the active language. Repeating the same write is a no-op.

        Args:
            category: Category id (created if absent).
            key_path: Dot-separated key path.
            value: Message text.
            language_code: Target language (default: active language).

        Raises:
            UnsupportedLanguageError: If language_code is not available.
        """
        code = language_code or self._current_language

        with self._recording_errors("add_translation"):
            if not is_supported_language(code, self._languages):
                raise UnsupportedLanguageError(code)

            overrides = self.persistence.read_overrides()
            language_overrides = dict(overrides.get(code, {}))
            language_overrides[category] = set_nested_value(
                language_overrides.get(category, Branch()), key_path, value
            )
            overrides[code] = language_overrides
            self.persistence.write_overrides(overrides)

            if code == self._current_language:
                updated = dict(self._translations)
                updated[category] = set_nested_value(
                    updated.get(category, Branch()), key_path, value
                )
                self._translations = updated

            logger.info(
                "translation_added",
                language=code,
                category=category,
                key=key_path,
            )

    async def add_category(self, category: TranslationCategory) -> None:
        """Register a custom category.

        The category gets an empty tree in the active translations (unless
        it already has one) and in every language present in the persisted
        overrides.

        Args:
            category: Category definition.

        Raises:
            DuplicateCategoryError: If the id already exists.
        """
        with self._recording_errors("add_category"):
            if any(existing.id == category.id for existing in self._categories):
                raise DuplicateCategoryError(category.id)

            overrides = self.persistence.read_overrides()
            backfilled = False
            for code, language_overrides in overrides.items():
                if category.id not in language_overrides:
                    overrides[code] = {**language_overrides, category.id: Branch()}
                    backfilled = True
            if backfilled:
                self.persistence.write_overrides(overrides)

            custom_categories = self.persistence.read_custom_categories()
            custom_categories.append(category)
            self.persistence.write_custom_categories(custom_categories)

            self._categories.append(category)
            if category.id not in self._translations:
                self._translations = {**self._translations, category.id: Branch()}

            logger.info(
                "custom_category_added",
                category=category.id,
                backfilled_languages=len(overrides),
            )

    async def remove_language(self, code: str) -> None:
        """Remove a custom language and its persisted translations.

        When the removed language is active, the default language (or the
        fallback language when the default has no translations) is activated.

        Args:
            code: Custom language code.

        Raises:
            UnsupportedLanguageError: If the code is not available.
            BuiltinProtectedError: If the language is built-in.
        """
        with self._recording_errors("remove_language"):
            if not is_supported_language(code, self._languages):
                raise UnsupportedLanguageError(code)
            if is_supported_language(code, self._builtin_languages):
                raise BuiltinProtectedError("language", code)

            custom_languages = [
                language
                for language in self.persistence.read_custom_languages()
                if language.code != code
            ]
            self.persistence.write_custom_languages(custom_languages)

            overrides = self.persistence.read_overrides()
            if overrides.pop(code, None) is not None:
                self.persistence.write_overrides(overrides)

            self._languages = [
                language for language in self._languages if language.code != code
            ]

            if code == self._current_language:
                self._activate_default()

            logger.info("custom_language_removed", language=code)

    async def remove_category(self, category_id: str) -> None:
        """Remove a custom category from every language.

        Args:
            category_id: Custom category id.

        Raises:
            CategoryNotFoundError: If the category does not exist.
            BuiltinProtectedError: If the category is built-in.
        """
        with self._recording_errors("remove_category"):
            if not any(category.id == category_id for category in self._categories):
                raise CategoryNotFoundError(category_id)
            if any(category.id == category_id for category in self._builtin_categories):
                raise BuiltinProtectedError("category", category_id)

            custom_categories = [
                category
                for category in self.persistence.read_custom_categories()
                if category.id != category_id
            ]
            self.persistence.write_custom_categories(custom_categories)

            overrides = self.persistence.read_overrides()
            changed = False
            for code, language_overrides in overrides.items():
                if category_id in language_overrides:
                    overrides[code] = {
                        key: tree
                        for key, tree in language_overrides.items()
                        if key != category_id
                    }
                    changed = True
            if changed:
                self.persistence.write_overrides(overrides)

            self._categories = [
                category for category in self._categories if category.id != category_id
            ]
            self._translations = self._load_translations(self._current_language)

            logger.info("custom_category_removed", category=category_id)

    async def remove_translation(
        self,
        category: str,
        key_path: str,
        language_code: Optional[str] = None,
    ) -> None:
        """Drop a persisted translation override.

        A built-in value for the same key becomes visible again. Removing a
        key that has no override is a no-op.

        Args:
            category: Category id.
            key_path: Dot-separated key path.
            language_code: Target language (default: active language).

        Raises:
            UnsupportedLanguageError: If language_code is not available.
        """
        code = language_code or self._current_language

        with self._recording_errors("remove_translation"):
            if not is_supported_language(code, self._languages):
                raise UnsupportedLanguageError(code)

            overrides = self.persistence.read_overrides()
            language_overrides = overrides.get(code, {})
            tree = language_overrides.get(category)
            if tree is None:
                return

            updated = remove_nested_value(tree, key_path)
            if updated is tree:
                return

            overrides[code] = {**language_overrides, category: updated}
            self.persistence.write_overrides(overrides)

            if code == self._current_language:
                self._translations = self._load_translations(code)

            logger.info(
                "translation_removed",
                language=code,
                category=category,
                key=key_path,
            )

    # Read path

    def translate(
        self,
        key: str,
        category: Optional[str] = None,
        params: Optional[Params] = None,
    ) -> Union[str, Branch]:
        """Resolve a key against the active translations.

        Args:
            key: Dot-separated key path.
            category: Category id (default: settings.DEFAULT_CATEGORY).
            params: Optional values for {{name}} placeholders.

        Returns:
            Translated string, the raw key when missing, or a Branch when
            key names a namespace.
        """
        return self.translator.resolve(
            self._translations,
            category or self.settings.DEFAULT_CATEGORY,
            key,
            params,
        )

    t = translate

    def missing_translations(self, code: str) -> Dict[str, List[str]]:
        """List fallback-language keys that a language does not translate.

        Args:
            code: Language code to audit.

        Returns:
            Mapping of category id to missing leaf key paths. Categories
            with full coverage are omitted.

        Raises:
            UnsupportedLanguageError: If the code is not available.
        """
        if not is_supported_language(code, self._languages):
            raise UnsupportedLanguageError(code)

        reference = self.catalog.translations_for(self.settings.FALLBACK_LANGUAGE) or {}
        target = self._load_translations(code)

        missing: Dict[str, List[str]] = {}
        for category, keys in extract_translation_keys(reference).items():
            tree = target.get(category)
            absent = [
                key
                for key in keys
                if tree is None or not isinstance(get_nested_value(tree, key), Leaf)
            ]
            if absent:
                missing[category] = absent
        return missing

    # Internals

    def _load_translations(self, code: str) -> Translations:
        translations = self.catalog.translations_for(code) or {}
        overrides = self.persistence.read_language_overrides(code)
        if overrides:
            translations = merge_translations(
                translations, overrides, self.merge_strategy
            )
        return translations

    def _activate_default(self) -> None:
        for code in (self._default_language, self.settings.FALLBACK_LANGUAGE):
            translations = self._load_translations(code)
            if translations:
                break
        self._current_language = code
        self._translations = translations
        if self.settings.PERSIST_LANGUAGE:
            self.persistence.write_language(code)

    @staticmethod
    def _with_custom(builtins, custom, key) -> list:
        merged = list(builtins)
        seen = {key(item) for item in merged}
        for item in custom:
            if key(item) in seen:
                logger.warning("skipped_duplicate_custom_entry", identifier=key(item))
                continue
            seen.add(key(item))
            merged.append(item)
        return merged

    @contextmanager
    def _recording_errors(self, operation: str) -> Iterator[None]:
        self._error = None
        try:
            yield
        except I18nError as e:
            self._error = e.to_state()
            logger.warning(
                "i18n_operation_failed",
                operation=operation,
                kind=e.kind.value,
                error=e.message,
            )
            raise
