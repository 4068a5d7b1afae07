"""
JSON file adapter implementation for the launcher item list.
"""

import json
import logging
import os
import threading
from typing import Any

from typing_extensions import override

from quicklauncher.entities.Item import LauncherItem
from quicklauncher.exceptions import (
    DuplicateItemError,
    ItemNotFoundError,
    ItemRepositoryError,
)
from quicklauncher.ports.storage.item_repository_port import ItemRepositoryPort


class JsonItemRepository(ItemRepositoryPort):
    """Stores the item list as a JSON array in a single UTF-8 file."""

    def __init__(self, file_path: str, logger: logging.Logger | None = None):
        """
        Initialize the repository.

        Args:
            file_path: Path of the items.json file; created on first save
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._file_path = os.path.abspath(os.path.expanduser(file_path))
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        # set when the file on disk could not be read in full
        self._damaged = False

    def _load(self) -> list[LauncherItem]:
        """
        Read the item list from disk.

        A missing file is an empty list. An unreadable or corrupt file is logged and
        treated as empty, so a damaged file never blocks the launcher. The damaged
        file is moved aside to ``items.json.bak`` before the next save replaces it.
        """
        self._damaged = False
        if not os.path.exists(self._file_path):
            return []
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                raw: Any = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self._logger.error(f"Error loading items from {self._file_path}: {e}")
            self._damaged = True
            return []

        if not isinstance(raw, list):
            self._logger.error(f"Ignoring items file {self._file_path}: not a JSON array")
            self._damaged = True
            return []

        items: list[LauncherItem] = []
        for entry in raw:
            try:
                items.append(LauncherItem.from_dict(entry))
            except (ValueError, AttributeError) as e:
                # Log the error but keep the other items
                self._logger.warning(f"Skipping invalid item {entry!r}: {e}")
                self._damaged = True
        return items

    def _save(self, items: list[LauncherItem]) -> None:
        """
        Write the item list atomically (temp file, then rename).

        Raises:
            ItemRepositoryError: If the file cannot be written
        """
        directory = os.path.dirname(self._file_path)
        tmp_path = f"{self._file_path}.tmp"
        try:
            os.makedirs(directory, exist_ok=True)
            if self._damaged and os.path.exists(self._file_path):
                os.replace(self._file_path, self.backup_path)
                self._logger.warning(f"Moved damaged items file to {self.backup_path}")
            self._damaged = False
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump([i.to_dict() for i in items], f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self._file_path)
        except OSError as e:
            self._logger.error(f"Error saving items to {self._file_path}: {e}")
            raise ItemRepositoryError(f"Save failed: {e}") from e

    @property
    def backup_path(self) -> str:
        return f"{self._file_path}.bak"

    def _check_index(self, items: list[LauncherItem], index: int) -> None:
        if index < 0 or index >= len(items):
            raise ItemNotFoundError(f"Item does not exist: index {index}")

    @override
    def list_items(self) -> list[LauncherItem]:
        with self._lock:
            return self._load()

    @override
    def add_item(self, item: LauncherItem) -> int:
        with self._lock:
            items = self._load()
            if any(i.path == item.path for i in items):
                raise DuplicateItemError(f"Item already exists: {item.path}")
            items.append(item)
            self._save(items)
            return len(items) - 1

    @override
    def update_item(self, index: int, item: LauncherItem) -> LauncherItem:
        with self._lock:
            items = self._load()
            self._check_index(items, index)
            if any(i.path == item.path for n, i in enumerate(items) if n != index):
                raise DuplicateItemError(f"Item already exists: {item.path}")
            items[index] = item
            self._save(items)
            return item

    @override
    def remove_item(self, index: int) -> LauncherItem:
        with self._lock:
            items = self._load()
            self._check_index(items, index)
            removed = items.pop(index)
            self._save(items)
            return removed

    @override
    def replace_all(self, items: list[LauncherItem]) -> list[LauncherItem]:
        with self._lock:
            self._save(list(items))
            return list(items)

    @override
    def storage_path(self) -> str:
        return self._file_path
