"""
Item repository port interface defining the contract for the launcher item list.
"""

from abc import ABC, abstractmethod

from quicklauncher.entities.Item import LauncherItem


class ItemRepositoryPort(ABC):
    """Port interface for item list storage. Order is significant and preserved."""

    @abstractmethod
    def list_items(self) -> list[LauncherItem]:
        """
        Return all stored items in display order.

        Raises:
            ItemRepositoryError: If the storage cannot be read
        """
        pass

    @abstractmethod
    def add_item(self, item: LauncherItem) -> int:
        """
        Append an item to the list.

        Returns:
            Index of the new item, read in the same write

        Raises:
            DuplicateItemError: If an item with the same path already exists
            ItemRepositoryError: If saving fails
        """
        pass

    @abstractmethod
    def update_item(self, index: int, item: LauncherItem) -> LauncherItem:
        """
        Replace the item at the given index.

        Raises:
            ItemNotFoundError: If the index is out of range
            ItemRepositoryError: If saving fails
        """
        pass

    @abstractmethod
    def remove_item(self, index: int) -> LauncherItem:
        """
        Remove and return the item at the given index.

        Raises:
            ItemNotFoundError: If the index is out of range
            ItemRepositoryError: If saving fails
        """
        pass

    @abstractmethod
    def replace_all(self, items: list[LauncherItem]) -> list[LauncherItem]:
        """
        Replace the whole list, used for reordering and clearing.

        Raises:
            ItemRepositoryError: If saving fails
        """
        pass

    @abstractmethod
    def storage_path(self) -> str:
        """Location of the underlying storage, for display."""
        pass
