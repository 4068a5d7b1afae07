"""
Use case for listing the launcher items.
"""

import logging
from typing import Optional

from quicklauncher.entities.Item import LauncherItem
from quicklauncher.exceptions import ItemRepositoryError
from quicklauncher.ports.storage.item_repository_port import ItemRepositoryPort


class ListItemsUseCase:
    """Use case for listing the launcher items in display order."""

    def __init__(
        self,
        repository: ItemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> list[LauncherItem]:
        """
        Raises:
            ItemRepositoryError: If the item list cannot be read
        """
        try:
            items = self._repository.list_items()
            self._logger.info(f"Loaded {len(items)} items")
            return items
        except ItemRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing items: {e}")
            raise ItemRepositoryError(f"Failed to list items: {str(e)}")
