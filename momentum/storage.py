"""Key-value persistence for Momentum state.

Every adapter round-trips values through JSON text and never raises on an
unavailable store: ``load`` reports absence as ``None`` and ``save`` is
skipped.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from momentum.fileio import dump_json, read_json, write_json_atomic
from momentum.workspace import store_dir, store_key_path, workspace_root

logger = logging.getLogger(__name__)

STORAGE_KEYS = ("habits", "streak", "level", "points", "schedule")


class Storage:
    """Base adapter contract."""

    def load(self, key: str) -> Any:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError


class NullStorage(Storage):
    """Used when no durable store is reachable."""

    def load(self, key: str) -> Any:
        return None

    def save(self, key: str, value: Any) -> None:
        return None


class MemoryStorage(Storage):
    """Keeps serialized JSON text in memory."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def load(self, key: str) -> Any:
        text = self.data.get(key)
        if text is None:
            return None
        return json.loads(text)

    def save(self, key: str, value: Any) -> None:
        self.data[key] = dump_json(value)


class FileStorage(Storage):
    """One JSON file per key under <root>/store/."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else workspace_root()

    def path_for(self, key: str) -> Path:
        return store_key_path(key, self.root)

    def load(self, key: str) -> Any:
        path = self.path_for(key)
        try:
            return read_json(path)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store entry %s: %s", path, e)
            return None

    def save(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        try:
            write_json_atomic(path, value)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Skipping save of %r to %s: %s", key, path, e)


def select_storage(root: Path | None = None) -> Storage:
    """Pick the adapter once at startup.

    FileStorage when the store directory exists (or can be created) and is
    writable, NullStorage otherwise.
    """
    if root is None:
        root = workspace_root()
    directory = store_dir(root)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Store directory %s unavailable (%s); state will not persist", directory, e)
        return NullStorage()
    if not os.access(directory, os.W_OK):
        logger.warning("Store directory %s is read-only; state will not persist", directory)
        return NullStorage()
    return FileStorage(root)
