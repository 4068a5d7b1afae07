"""
Use cases for invoking a stored item: open it, or reveal it in the file manager.
"""

import logging
from typing import Optional

from quicklauncher.entities.Item import LauncherItem
from quicklauncher.entities.Target import DispatchResult, TargetKind
from quicklauncher.exceptions import ItemNotFoundError, LaunchError
from quicklauncher.ports.storage.item_repository_port import ItemRepositoryPort
from quicklauncher.ports.system.system_opener_port import SystemOpenerPort
from quicklauncher.use_cases.targets.dispatch_target import DispatchTargetUseCase
from quicklauncher.utils.classifier import classify


def _get_item(repository: ItemRepositoryPort, index: int) -> LauncherItem:
    items = repository.list_items()
    if index < 0 or index >= len(items):
        raise ItemNotFoundError(f"Item does not exist: index {index}")
    return items[index]


class OpenItemUseCase:
    """Dispatch the item at an index using its stored type."""

    def __init__(
        self,
        repository: ItemRepositoryPort,
        dispatcher: DispatchTargetUseCase,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._dispatcher = dispatcher
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, index: int) -> DispatchResult:
        """
        Raises:
            ItemNotFoundError: If the index is out of range
        """
        item = _get_item(self._repository, index)
        if item.kind is None or not item.kind.dispatchable:
            # Legacy entries without a usable type are classified on the fly
            item = LauncherItem(path=item.path, type=classify(item.path), name=item.name)
        return self._dispatcher.execute(item.to_target())


class RevealItemUseCase:
    """Show a file or folder item selected in the platform file manager."""

    def __init__(
        self,
        repository: ItemRepositoryPort,
        opener: SystemOpenerPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._opener = opener
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, index: int) -> LauncherItem:
        """
        Raises:
            ItemNotFoundError: If the index is out of range
            LaunchError: If the item is not a path or the file manager cannot start
        """
        item = _get_item(self._repository, index)
        if item.kind not in (TargetKind.FILE, TargetKind.FOLDER):
            raise LaunchError(f"Only files and folders can be revealed: {item.path}")
        self._opener.reveal(item.path)
        return item
