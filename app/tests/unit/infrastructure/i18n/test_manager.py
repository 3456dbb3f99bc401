"""Tests for infrastructure.i18n.manager module."""

import json

import pytest

from infrastructure.i18n import (
    BuiltinProtectedError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    DuplicateLanguageError,
    I18nErrorKind,
    InMemoryLocaleStore,
    InvalidLanguageError,
    LocaleManager,
    LocalePhase,
    UnsupportedLanguageError,
)
from infrastructure.i18n.models import Branch, Leaf
from infrastructure.i18n.utils import get_nested_value
from infrastructure.operations import OperationStatus
from tests.factories.i18n import make_category, make_language

LANGUAGE_KEY = "bestitconsulting_language"
TRANSLATIONS_KEY = "bestitconsulting_translations"
CUSTOM_LANGUAGES_KEY = "bestitconsulting_custom_languages"
CUSTOM_CATEGORIES_KEY = "bestitconsulting_custom_categories"


class FailingStore(InMemoryLocaleStore):
    """Store whose reads fail, as an unavailable backend would."""

    def get(self, key):
        raise OSError("store unavailable")


def make_manager(catalog, store, settings, preferred=None, **overrides):
    if overrides:
        settings = settings.model_copy(update=overrides)
    return LocaleManager(
        catalog=catalog,
        store=store,
        settings=settings,
        preferred_language=lambda: preferred,
    )


def codes(languages):
    return [language.code for language in languages]


class TestInitialize:
    """Tests for LocaleManager.initialize()."""

    def test_phase_before_initialize(self, manager):
        assert manager.phase == LocalePhase.UNINITIALIZED
        assert manager.translations == {}

    @pytest.mark.asyncio
    async def test_initialize_defaults(self, manager, memory_store):
        """No persisted state: default language is activated and persisted."""
        await manager.initialize()

        assert manager.current_language == "en"
        assert manager.phase == LocalePhase.READY
        assert manager.is_loading is False
        assert manager.error is None
        assert codes(manager.available_languages) == ["en", "fr", "de"]
        assert [c.id for c in manager.categories] == ["nav", "common", "services"]
        assert memory_store.get(LANGUAGE_KEY) == "en"

    @pytest.mark.asyncio
    async def test_persisted_language_wins(self, catalog, i18n_settings):
        store = InMemoryLocaleStore({LANGUAGE_KEY: "fr"})
        manager = make_manager(catalog, store, i18n_settings, preferred="en-US")

        await manager.initialize()

        assert manager.current_language == "fr"
        assert manager.t("save") == "Sauvegarder"

    @pytest.mark.asyncio
    async def test_unavailable_persisted_language_ignored(self, catalog, i18n_settings):
        store = InMemoryLocaleStore({LANGUAGE_KEY: "zz"})
        manager = make_manager(catalog, store, i18n_settings)

        await manager.initialize()

        assert manager.current_language == "en"
        assert manager.phase == LocalePhase.READY

    @pytest.mark.asyncio
    async def test_environment_preference(self, catalog, memory_store, i18n_settings):
        manager = make_manager(catalog, memory_store, i18n_settings, preferred="fr-CA")

        await manager.initialize()

        assert manager.current_language == "fr"

    @pytest.mark.asyncio
    async def test_unsupported_environment_preference(
        self, catalog, memory_store, i18n_settings
    ):
        manager = make_manager(catalog, memory_store, i18n_settings, preferred="pt-BR")

        await manager.initialize()

        assert manager.current_language == "en"

    @pytest.mark.asyncio
    async def test_persistence_disabled(self, catalog, i18n_settings):
        """Stored choice is neither read nor written."""
        store = InMemoryLocaleStore({LANGUAGE_KEY: "fr"})
        manager = make_manager(catalog, store, i18n_settings, PERSIST_LANGUAGE=False)

        await manager.initialize()
        await manager.set_language("fr")

        assert manager.current_language == "fr"
        await manager.initialize()
        assert manager.current_language == "en"
        assert store.get(LANGUAGE_KEY) == "fr"

    @pytest.mark.asyncio
    async def test_default_language_argument(self, manager):
        await manager.initialize(default_language="fr")
        assert manager.current_language == "fr"

    @pytest.mark.asyncio
    async def test_builtin_lists_arguments(self, manager):
        await manager.initialize(
            builtin_languages=[make_language(code="en", name="English", native_name="English")],
            builtin_categories=[make_category("common", "Common")],
        )

        assert codes(manager.available_languages) == ["en"]
        assert [c.id for c in manager.categories] == ["common"]

    @pytest.mark.asyncio
    async def test_custom_state_merged(self, catalog, i18n_settings):
        """Persisted custom languages, categories and overrides are loaded."""
        store = InMemoryLocaleStore(
            {
                CUSTOM_LANGUAGES_KEY: json.dumps(
                    [{"code": "tlh", "name": "Klingon", "nativeName": "tlhIngan Hol"}]
                ),
                CUSTOM_CATEGORIES_KEY: json.dumps([{"id": "pricing", "name": "Pricing"}]),
                TRANSLATIONS_KEY: json.dumps({"en": {"common": {"save": "Store"}}}),
            }
        )
        manager = make_manager(catalog, store, i18n_settings)

        await manager.initialize()

        assert codes(manager.available_languages) == ["en", "fr", "de", "tlh"]
        assert [c.id for c in manager.categories][-1] == "pricing"
        assert manager.t("save") == "Store"
        assert manager.t("cancel") == "Cancel"

    @pytest.mark.asyncio
    async def test_duplicate_custom_entries_skipped(self, catalog, i18n_settings):
        store = InMemoryLocaleStore(
            {
                CUSTOM_LANGUAGES_KEY: json.dumps(
                    [{"code": "fr", "name": "French", "nativeName": "Français"}]
                ),
                CUSTOM_CATEGORIES_KEY: json.dumps([{"id": "nav", "name": "Nav"}]),
            }
        )
        manager = make_manager(catalog, store, i18n_settings)

        await manager.initialize()

        assert codes(manager.available_languages) == ["en", "fr", "de"]
        assert len(manager.categories) == 3

    @pytest.mark.asyncio
    async def test_language_without_translations_falls_back(self, catalog, i18n_settings):
        """A persisted language with nothing to show degrades to the fallback."""
        store = InMemoryLocaleStore({LANGUAGE_KEY: "de"})
        manager = make_manager(catalog, store, i18n_settings)

        await manager.initialize()

        assert manager.current_language == "en"
        assert manager.phase == LocalePhase.FAILED
        assert manager.error.kind == I18nErrorKind.INITIALIZATION_FAILURE
        assert "de" in manager.error.message
        assert manager.t("save") == "Save"

    @pytest.mark.asyncio
    async def test_store_failure_falls_back(self, catalog, i18n_settings):
        manager = make_manager(catalog, FailingStore(), i18n_settings)

        await manager.initialize()

        assert manager.current_language == "en"
        assert manager.phase == LocalePhase.FAILED
        assert manager.error.kind == I18nErrorKind.INITIALIZATION_FAILURE
        assert manager.t("home", category="nav") == "Home"

    @pytest.mark.asyncio
    async def test_reinitialize_clears_error(self, catalog, i18n_settings):
        store = InMemoryLocaleStore({LANGUAGE_KEY: "de"})
        manager = make_manager(catalog, store, i18n_settings)
        await manager.initialize()

        store.set(LANGUAGE_KEY, "fr")
        await manager.initialize()

        assert manager.error is None
        assert manager.phase == LocalePhase.READY
        assert manager.current_language == "fr"


class TestSetLanguage:
    """Tests for LocaleManager.set_language()."""

    @pytest.mark.asyncio
    async def test_switch_language(self, manager, memory_store):
        await manager.initialize()

        result = await manager.set_language("fr")

        assert result.is_success
        assert result.data == "fr"
        assert manager.current_language == "fr"
        assert manager.phase == LocalePhase.READY
        assert manager.t("home", category="nav") == "Accueil"
        assert memory_store.get(LANGUAGE_KEY) == "fr"

    @pytest.mark.asyncio
    async def test_unsupported_language(self, manager, memory_store):
        """State is unchanged and the failure is recorded."""
        await manager.initialize()

        result = await manager.set_language("zz")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "unsupported_language"
        assert manager.current_language == "en"
        assert manager.error.kind == I18nErrorKind.UNSUPPORTED_LANGUAGE
        assert manager.error.message == "Unsupported language: zz"
        assert manager.phase == LocalePhase.READY
        assert memory_store.get(LANGUAGE_KEY) == "en"

    @pytest.mark.asyncio
    async def test_language_without_translations(self, manager):
        await manager.initialize()
        before = manager.translations

        result = await manager.set_language("de")

        assert result.error_code == "translations_not_found"
        assert manager.error.kind == I18nErrorKind.TRANSLATIONS_NOT_FOUND
        assert manager.current_language == "en"
        assert manager.translations == before

    @pytest.mark.asyncio
    async def test_language_with_only_custom_translations(self, manager):
        """A declared language becomes selectable once it has overrides."""
        await manager.initialize()
        await manager.add_translation("common", "save", "Speichern", "de")

        result = await manager.set_language("de")

        assert result.is_success
        assert manager.t("save") == "Speichern"
        assert manager.t("cancel") == "Cancel"

    @pytest.mark.asyncio
    async def test_success_clears_previous_error(self, manager):
        await manager.initialize()
        await manager.set_language("zz")

        await manager.set_language("fr")

        assert manager.error is None

    @pytest.mark.asyncio
    async def test_persists_override_merged_translations(self, manager):
        await manager.initialize()
        await manager.add_translation("common", "save", "Enregistrer", "fr")

        await manager.set_language("fr")

        assert manager.t("save") == "Enregistrer"
        assert manager.t("cancel") == "Annuler"


class TestAddLanguage:
    """Tests for LocaleManager.add_language()."""

    @pytest.mark.asyncio
    async def test_add_language(self, manager, memory_store):
        await manager.initialize()
        language = make_language(code="tlh", name="Klingon", native_name="tlhIngan Hol")

        await manager.add_language(language, {"common": {"save": "pol"}})

        assert codes(manager.available_languages)[-1] == "tlh"
        assert manager.current_language == "en"
        stored = json.loads(memory_store.get(CUSTOM_LANGUAGES_KEY))
        assert stored[0]["code"] == "tlh"
        assert stored[0]["nativeName"] == "tlhIngan Hol"
        assert json.loads(memory_store.get(TRANSLATIONS_KEY)) == {
            "tlh": {"common": {"save": "pol"}}
        }

    @pytest.mark.asyncio
    async def test_added_language_is_selectable(self, manager):
        await manager.initialize()
        await manager.add_language(
            make_language(code="tlh", name="Klingon", native_name="tlhIngan Hol"),
            {"common": {"save": "pol"}},
        )

        result = await manager.set_language("tlh")

        assert result.is_success
        assert manager.t("save") == "pol"
        assert manager.t("cancel") == "Cancel"

    @pytest.mark.asyncio
    async def test_added_language_survives_reinitialize(
        self, catalog, memory_store, i18n_settings
    ):
        first = make_manager(catalog, memory_store, i18n_settings)
        await first.initialize()
        await first.add_language(
            make_language(code="tlh", name="Klingon", native_name="tlhIngan Hol"),
            {"common": {"save": "pol"}},
        )
        await first.set_language("tlh")

        second = make_manager(catalog, memory_store, i18n_settings)
        await second.initialize()

        assert "tlh" in codes(second.available_languages)
        assert second.current_language == "tlh"
        assert second.t("save") == "pol"

    @pytest.mark.asyncio
    async def test_duplicate_language(self, manager):
        await manager.initialize()

        with pytest.raises(DuplicateLanguageError):
            await manager.add_language(
                make_language(code="en", name="English", native_name="English"), {}
            )

        assert codes(manager.available_languages) == ["en", "fr", "de"]
        assert manager.error.kind == I18nErrorKind.DUPLICATE_LANGUAGE

    @pytest.mark.asyncio
    async def test_invalid_language_persists_nothing(self, manager, memory_store):
        await manager.initialize()

        with pytest.raises(InvalidLanguageError) as exc_info:
            await manager.add_language(
                make_language(code="xx", name="", native_name="Xx"), {}
            )

        assert exc_info.value.errors == ["Language name is required"]
        assert manager.error.kind == I18nErrorKind.INVALID_LANGUAGE
        assert memory_store.get(CUSTOM_LANGUAGES_KEY) is None
        assert memory_store.get(TRANSLATIONS_KEY) is None
        assert "xx" not in codes(manager.available_languages)

    @pytest.mark.asyncio
    async def test_invalid_tree(self, manager, memory_store):
        await manager.initialize()

        with pytest.raises(InvalidLanguageError):
            await manager.add_language(
                make_language(code="xx", name="Xx", native_name="Xx"),
                {"common": {"items": ["a", "b"]}},
            )

        assert memory_store.get(CUSTOM_LANGUAGES_KEY) is None

    @pytest.mark.asyncio
    async def test_validation_runs_before_duplicate_check(self, manager):
        await manager.initialize()

        with pytest.raises(InvalidLanguageError):
            await manager.add_language(make_language(code="en", name=""), {})


class TestAddTranslation:
    """Tests for LocaleManager.add_translation()."""

    @pytest.mark.asyncio
    async def test_active_language_updated_immediately(self, manager, memory_store):
        await manager.initialize()

        await manager.add_translation("common", "newKey", "New Value")

        assert manager.t("newKey") == "New Value"
        assert json.loads(memory_store.get(TRANSLATIONS_KEY)) == {
            "en": {"common": {"newKey": "New Value"}}
        }

    @pytest.mark.asyncio
    async def test_write_then_read_across_language_switch(self, manager):
        await manager.initialize()
        await manager.set_language("fr")

        await manager.add_translation("common", "newKey", "New Value", "en")
        assert manager.t("newKey") == "newKey"
        await manager.set_language("en")

        assert manager.t("newKey") == "New Value"

    @pytest.mark.asyncio
    async def test_inactive_language_not_updated_in_memory(self, manager):
        await manager.initialize()

        await manager.add_translation("common", "save", "Enregistrer", "fr")

        assert manager.t("save") == "Save"
        await manager.set_language("fr")
        assert manager.t("save") == "Enregistrer"

    @pytest.mark.asyncio
    async def test_nested_key_creates_intermediate_nodes(self, manager):
        await manager.initialize()

        await manager.add_translation("services", "process.step1.title", "Discovery")

        assert manager.t("process.step1.title", category="services") == "Discovery"
        assert manager.t("process.title", category="services") == "Our Process"

    @pytest.mark.asyncio
    async def test_nested_override_survives_reload(self, manager):
        """Recursive merge keeps built-in siblings of an overridden key."""
        await manager.initialize()
        await manager.add_translation("services", "process.title", "Process")

        await manager.set_language("en")

        services = manager.translations["services"]
        assert get_nested_value(services, "process.title") == Leaf("Process")
        assert get_nested_value(services, "process.subtitle") == Leaf(
            "How We Work With You"
        )

    @pytest.mark.asyncio
    async def test_category_merge_strategy_replaces_object(
        self, catalog, memory_store, i18n_settings
    ):
        manager = make_manager(
            catalog, memory_store, i18n_settings, MERGE_STRATEGY="category"
        )
        await manager.initialize()
        await manager.add_translation("services", "process.title", "Process")

        await manager.set_language("en")

        services = manager.translations["services"]
        assert get_nested_value(services, "process.title") == Leaf("Process")
        assert get_nested_value(services, "process.subtitle") is None

    @pytest.mark.asyncio
    async def test_unsupported_language(self, manager, memory_store):
        await manager.initialize()

        with pytest.raises(UnsupportedLanguageError):
            await manager.add_translation("common", "save", "x", "zz")

        assert manager.error.kind == I18nErrorKind.UNSUPPORTED_LANGUAGE
        assert memory_store.get(TRANSLATIONS_KEY) is None

    @pytest.mark.asyncio
    async def test_repeated_identical_write_is_idempotent(self, manager, memory_store):
        await manager.initialize()

        await manager.add_translation("common", "save", "Store")
        first_payload = memory_store.get(TRANSLATIONS_KEY)
        first_translations = manager.translations
        await manager.add_translation("common", "save", "Store")

        assert memory_store.get(TRANSLATIONS_KEY) == first_payload
        assert manager.translations == first_translations

    @pytest.mark.asyncio
    async def test_does_not_modify_catalog(self, manager, catalog):
        await manager.initialize()

        await manager.add_translation("common", "save", "Store")

        assert catalog.get("en").translations["common"].get("save") == Leaf("Save")


class TestAddCategory:
    """Tests for LocaleManager.add_category()."""

    @pytest.mark.asyncio
    async def test_add_category_then_translation(self, manager):
        await manager.initialize()

        await manager.add_category(make_category("pricing", "Pricing"))
        await manager.add_translation("pricing", "plan.free", "Free")

        assert [c.id for c in manager.categories][-1] == "pricing"
        assert manager.t("plan.free", category="pricing") == "Free"

    @pytest.mark.asyncio
    async def test_empty_tree_initialized(self, manager, memory_store):
        await manager.initialize()

        await manager.add_category(make_category("pricing", "Pricing"))

        assert manager.translations["pricing"] == Branch()
        stored = json.loads(memory_store.get(CUSTOM_CATEGORIES_KEY))
        assert stored == [{"id": "pricing", "name": "Pricing"}]

    @pytest.mark.asyncio
    async def test_existing_tree_is_kept(self, manager):
        await manager.initialize()
        await manager.add_translation("pricing", "plan.free", "Free")

        await manager.add_category(make_category("pricing", "Pricing"))

        assert manager.t("plan.free", category="pricing") == "Free"

    @pytest.mark.asyncio
    async def test_backfills_override_languages(self, manager, memory_store):
        await manager.initialize()
        await manager.add_translation("common", "save", "Enregistrer", "fr")

        await manager.add_category(make_category("pricing", "Pricing"))

        overrides = json.loads(memory_store.get(TRANSLATIONS_KEY))
        assert overrides["fr"]["pricing"] == {}

    @pytest.mark.asyncio
    async def test_duplicate_category(self, manager):
        await manager.initialize()

        with pytest.raises(DuplicateCategoryError):
            await manager.add_category(make_category("common", "Common"))

        assert len(manager.categories) == 3
        assert manager.error.kind == I18nErrorKind.DUPLICATE_CATEGORY

    @pytest.mark.asyncio
    async def test_category_survives_reinitialize(
        self, catalog, memory_store, i18n_settings
    ):
        first = make_manager(catalog, memory_store, i18n_settings)
        await first.initialize()
        await first.add_category(make_category("pricing", "Pricing"))

        second = make_manager(catalog, memory_store, i18n_settings)
        await second.initialize()

        assert "pricing" in [c.id for c in second.categories]


class TestRemovals:
    """Tests for remove_language / remove_category / remove_translation."""

    @pytest.mark.asyncio
    async def test_remove_custom_language(self, manager, memory_store):
        await manager.initialize()
        await manager.add_language(
            make_language(code="tlh", name="Klingon", native_name="tlhIngan Hol"),
            {"common": {"save": "pol"}},
        )

        await manager.remove_language("tlh")

        assert "tlh" not in codes(manager.available_languages)
        assert json.loads(memory_store.get(CUSTOM_LANGUAGES_KEY)) == []
        assert "tlh" not in json.loads(memory_store.get(TRANSLATIONS_KEY))

    @pytest.mark.asyncio
    async def test_remove_active_language_activates_default(self, manager, memory_store):
        await manager.initialize()
        await manager.add_language(
            make_language(code="tlh", name="Klingon", native_name="tlhIngan Hol"),
            {"common": {"save": "pol"}},
        )
        await manager.set_language("tlh")

        await manager.remove_language("tlh")

        assert manager.current_language == "en"
        assert manager.t("save") == "Save"
        assert memory_store.get(LANGUAGE_KEY) == "en"

    @pytest.mark.asyncio
    async def test_remove_builtin_language(self, manager):
        await manager.initialize()

        with pytest.raises(BuiltinProtectedError):
            await manager.remove_language("fr")

        assert "fr" in codes(manager.available_languages)
        assert manager.error.kind == I18nErrorKind.BUILTIN_PROTECTED

    @pytest.mark.asyncio
    async def test_remove_unknown_language(self, manager):
        await manager.initialize()

        with pytest.raises(UnsupportedLanguageError):
            await manager.remove_language("zz")

    @pytest.mark.asyncio
    async def test_remove_custom_category(self, manager, memory_store):
        await manager.initialize()
        await manager.add_category(make_category("pricing", "Pricing"))
        await manager.add_translation("pricing", "plan.free", "Free")
        await manager.add_translation("pricing", "plan.free", "Gratuit", "fr")

        await manager.remove_category("pricing")

        assert "pricing" not in [c.id for c in manager.categories]
        assert "pricing" not in manager.translations
        overrides = json.loads(memory_store.get(TRANSLATIONS_KEY))
        assert all("pricing" not in tree for tree in overrides.values())
        assert json.loads(memory_store.get(CUSTOM_CATEGORIES_KEY)) == []

    @pytest.mark.asyncio
    async def test_remove_builtin_category(self, manager):
        await manager.initialize()

        with pytest.raises(BuiltinProtectedError):
            await manager.remove_category("common")

    @pytest.mark.asyncio
    async def test_remove_unknown_category(self, manager):
        await manager.initialize()

        with pytest.raises(CategoryNotFoundError):
            await manager.remove_category("pricing")

        assert manager.error.kind == I18nErrorKind.CATEGORY_NOT_FOUND

    @pytest.mark.asyncio
    async def test_remove_translation_restores_builtin(self, manager):
        await manager.initialize()
        await manager.add_translation("common", "save", "Store")

        await manager.remove_translation("common", "save")

        assert manager.t("save") == "Save"

    @pytest.mark.asyncio
    async def test_remove_translation_for_inactive_language(self, manager, memory_store):
        await manager.initialize()
        await manager.add_translation("common", "save", "Enregistrer", "fr")

        await manager.remove_translation("common", "save", "fr")

        assert json.loads(memory_store.get(TRANSLATIONS_KEY)) == {"fr": {"common": {}}}
        await manager.set_language("fr")
        assert manager.t("save") == "Sauvegarder"

    @pytest.mark.asyncio
    async def test_remove_missing_translation_is_noop(self, manager, memory_store):
        await manager.initialize()

        await manager.remove_translation("common", "save")

        assert memory_store.get(TRANSLATIONS_KEY) is None
        assert manager.error is None
        assert manager.t("save") == "Save"

    @pytest.mark.asyncio
    async def test_remove_translation_unsupported_language(self, manager):
        await manager.initialize()

        with pytest.raises(UnsupportedLanguageError):
            await manager.remove_translation("common", "save", "zz")


class TestReadPath:
    """Tests for translate() and missing_translations()."""

    @pytest.mark.asyncio
    async def test_translate_uses_default_category(self, manager):
        await manager.initialize()
        assert manager.translate("save") == "Save"
        assert manager.t("home", category="nav") == "Home"

    @pytest.mark.asyncio
    async def test_translate_with_params(self, manager):
        await manager.initialize()
        await manager.set_language("fr")

        assert manager.t("greeting", params={"name": "Ada"}) == "Bonjour, Ada !"

    @pytest.mark.asyncio
    async def test_fallback_to_english(self, manager):
        await manager.initialize()
        await manager.set_language("fr")

        assert manager.t("onlyEnglish") == "English only"

    @pytest.mark.asyncio
    async def test_missing_key_returns_key(self, manager):
        await manager.initialize()
        assert manager.t("missing.key") == "missing.key"

    @pytest.mark.asyncio
    async def test_missing_translations(self, manager):
        await manager.initialize()

        assert manager.missing_translations("fr") == {
            "common": ["onlyEnglish"],
            "services": ["process.subtitle"],
        }
        assert manager.missing_translations("en") == {}

    @pytest.mark.asyncio
    async def test_missing_translations_counts_overrides(self, manager):
        await manager.initialize()
        await manager.add_translation("common", "onlyEnglish", "Anglais", "fr")

        assert "common" not in manager.missing_translations("fr")

    @pytest.mark.asyncio
    async def test_missing_translations_unsupported(self, manager):
        await manager.initialize()

        with pytest.raises(UnsupportedLanguageError):
            manager.missing_translations("zz")

    @pytest.mark.asyncio
    async def test_translations_property_is_a_copy(self, manager):
        await manager.initialize()

        manager.translations.pop("common")

        assert "common" in manager.translations

    @pytest.mark.asyncio
    async def test_active_trees_cannot_rewrite_catalog(self, manager, catalog):
        """Trees handed out by the manager are read-only views."""
        await manager.initialize()

        with pytest.raises(TypeError):
            manager.translations["nav"].children["home"] = Leaf("Changed")
        with pytest.raises(TypeError):
            manager.t("process", category="services").children["title"] = Leaf("x")

        assert catalog.translations_for("en")["nav"].get("home") == Leaf("Home")
        assert manager.t("title", category="services") == "Our Services"
