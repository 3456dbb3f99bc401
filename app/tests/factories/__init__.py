"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_category,
    make_language,
    write_locales_dir,
)

__all__ = [
    "make_catalog",
    "make_category",
    "make_language",
    "write_locales_dir",
]
