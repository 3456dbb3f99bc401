"""Locale store abstract base class and implementations.

The store is the persistent key-value mechanism the engine reads and writes
through. It mirrors browser localStorage: string keys, string values, whole
value overwrites.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import structlog

logger = structlog.get_logger()


class LocaleStore(ABC):
    """Abstract base class for locale store implementations."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value stored under key.

        Args:
            key: Store key.

        Returns:
            Stored string or None if not found.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Args:
            key: Store key.
            value: String value.
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key. Removing a missing key is a no-op.

        Args:
            key: Store key.
        """
        pass


class InMemoryLocaleStore(LocaleStore):
    """Dict-backed store for tests and single-process use.

    Attributes:
        data: Backing dict.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JSONFileLocaleStore(LocaleStore):
    """Store persisted as a single JSON object on disk.

    The file is re-read on every get and rewritten on every change, so
    several stores pointing at the same file stay consistent when used
    serially.

    Attributes:
        path: JSON file path. Created on first write.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        logger.info("initialized_json_file_store", path=str(self.path))

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("store_file_unreadable", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.warning("store_file_invalid", path=str(self.path), expected="object")
            return {}
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)
