"""
Use case for registering a new launcher item.
"""

import logging
from typing import Optional

from quicklauncher.entities.Item import LauncherItem
from quicklauncher.entities.Target import TargetKind
from quicklauncher.exceptions import ClassificationError, ItemRepositoryError
from quicklauncher.ports.storage.item_repository_port import ItemRepositoryPort
from quicklauncher.utils.classifier import classify


def resolve_item_kind(item: LauncherItem) -> LauncherItem:
    """Fill in a missing type by classifying the path.

    Raises:
        ClassificationError: If the path is not a file, folder, URL or command
    """
    kind = item.kind or classify(item.path)
    if not kind.dispatchable:
        raise ClassificationError(f"Cannot determine the type of '{item.path}'")
    return LauncherItem(path=item.path, type=kind, name=item.name)


class AddItemUseCase:
    """Use case for appending an item to the launcher list."""

    def __init__(
        self,
        repository: ItemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, path: str, type: Optional[TargetKind | str] = None, name: Optional[str] = None
    ) -> tuple[int, LauncherItem]:
        """
        Add an item, classifying it when no type is given.

        Args:
            path: Raw target (path, URL or command)
            type: Explicit kind, overriding classification
            name: Optional display label

        Returns:
            Index of the new item and the stored item, with its type resolved

        Raises:
            ClassificationError: If the type cannot be determined
            DuplicateItemError: If the path is already registered
            ItemRepositoryError: If saving fails
        """
        try:
            item = resolve_item_kind(LauncherItem(path=path, type=type, name=name))
        except ValueError as e:
            raise ClassificationError(str(e))

        try:
            index = self._repository.add_item(item)
            self._logger.info(f"Added item {index}: {item}")
            return index, item
        except ItemRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error adding item: {e}")
            raise ItemRepositoryError(f"Failed to add item {path}: {str(e)}")
