import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection. Pytest
# may import `conftest` before the project root is on sys.path depending on
# invocation; add it explicitly here before importing application modules.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.configuration import I18nSettings  # noqa: E402
from infrastructure.i18n import InMemoryLocaleStore  # noqa: E402


@pytest.fixture
def i18n_settings():
    """I18nSettings with the packaged defaults, isolated from the environment."""
    return I18nSettings(
        DEFAULT_LANGUAGE="en",
        FALLBACK_LANGUAGE="en",
        DEFAULT_CATEGORY="common",
        PERSIST_LANGUAGE=True,
        MERGE_STRATEGY="recursive",
        LOCALES_DIR=None,
        STORE_PATH=None,
    )


@pytest.fixture
def memory_store():
    """Empty in-memory locale store."""
    return InMemoryLocaleStore()
