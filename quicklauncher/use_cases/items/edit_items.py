"""
Use cases for editing the launcher list: update, remove, reorder and clear.
"""

import logging
from typing import Optional

from quicklauncher.entities.Item import LauncherItem
from quicklauncher.entities.Target import TargetKind
from quicklauncher.exceptions import ClassificationError, ItemRepositoryError
from quicklauncher.ports.storage.item_repository_port import ItemRepositoryPort
from quicklauncher.use_cases.items.add_item import resolve_item_kind


class UpdateItemUseCase:
    def __init__(
        self,
        repository: ItemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        index: int,
        path: str,
        type: Optional[TargetKind | str] = None,
        name: Optional[str] = None,
    ) -> LauncherItem:
        """
        Replace the item at ``index``.

        Raises:
            ClassificationError: If the type cannot be determined
            ItemNotFoundError: If the index is out of range
            ItemRepositoryError: If saving fails
        """
        try:
            item = resolve_item_kind(LauncherItem(path=path, type=type, name=name))
        except ValueError as e:
            raise ClassificationError(str(e))
        updated = self._repository.update_item(index, item)
        self._logger.info(f"Updated item {index}: {updated}")
        return updated


class RemoveItemUseCase:
    def __init__(
        self,
        repository: ItemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, index: int) -> LauncherItem:
        removed = self._repository.remove_item(index)
        self._logger.info(f"Removed item {index}: {removed}")
        return removed


class ReorderItemsUseCase:
    """Apply a new order given as a permutation of the current indices."""

    def __init__(
        self,
        repository: ItemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, order: list[int]) -> list[LauncherItem]:
        """
        Args:
            order: New position -> old index, e.g. [2, 0, 1] moves the last item first

        Raises:
            ItemRepositoryError: If ``order`` is not a permutation of the current indices
        """
        items = self._repository.list_items()
        if sorted(order) != list(range(len(items))):
            raise ItemRepositoryError(
                f"Order must be a permutation of 0..{len(items) - 1}, got {order}"
            )
        reordered = self._repository.replace_all([items[i] for i in order])
        self._logger.info(f"Reordered {len(reordered)} items")
        return reordered


class ClearItemsUseCase:
    def __init__(
        self,
        repository: ItemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> None:
        self._repository.replace_all([])
        self._logger.info("Cleared all items")
