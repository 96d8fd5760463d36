# tablegen/settings_store.py
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

SETTINGS_KEY = "tableSettings"

SETTINGS_FIELDS = ("rows", "columns", "style", "has_header", "auto_number", "font_style", "is_numeric")

# Serializes read-modify-write cycles of every JsonFileStore in the process
_file_lock = threading.Lock()


class KeyValueStore(ABC):
    """Minimal persistence interface the settings live behind."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...


class MemoryStore(KeyValueStore):
    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Keeps every key in a single JSON object on disk.
    A missing or corrupt file reads as an empty store; the next write replaces it.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: top level is not an object", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, str]) -> None:
        """Write to a temp file beside the target, then swap it in; readers never see a partial file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with _file_lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def delete(self, key: str) -> None:
        with _file_lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)


def save_settings(store: KeyValueStore, settings: Mapping[str, Any]) -> None:
    """Serialize the form fields under SETTINGS_KEY. Counts stay as the raw text typed in."""
    payload = {name: settings.get(name) for name in SETTINGS_FIELDS}
    for name in ("rows", "columns"):
        if payload[name] is not None:
            payload[name] = str(payload[name])
    store.set(SETTINGS_KEY, json.dumps(payload))


def load_settings(store: KeyValueStore) -> Optional[Dict[str, Any]]:
    raw = store.get(SETTINGS_KEY)
    if raw is None:
        return None
    try:
        settings = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Saved table settings are not valid JSON, ignoring them")
        return None
    if not isinstance(settings, dict):
        return None
    return {name: settings.get(name) for name in SETTINGS_FIELDS}


def clear_settings(store: KeyValueStore) -> None:
    store.delete(SETTINGS_KEY)
