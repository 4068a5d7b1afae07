"""
Dependency injection container for managing application dependencies.
"""

import logging
import sys
from typing import Optional

from quicklauncher.adapters.commands.linux_command_runner import LinuxCommandRunner
from quicklauncher.adapters.commands.macos_command_runner import MacCommandRunner
from quicklauncher.adapters.commands.windows_command_runner import WindowsCommandRunner
from quicklauncher.adapters.storage.json_item_repository import JsonItemRepository
from quicklauncher.adapters.system.local_system_opener import LocalSystemOpener
from quicklauncher.adapters.system.subprocess_spawner import SubprocessSpawner
from quicklauncher.config.settings import Settings, settings as default_settings
from quicklauncher.entities.TerminalCandidate import resolve_terminal_candidates
from quicklauncher.ports.commands.command_runner_port import CommandRunnerPort
from quicklauncher.ports.storage.item_repository_port import ItemRepositoryPort
from quicklauncher.ports.system.process_spawner_port import ProcessSpawnerPort
from quicklauncher.ports.system.system_opener_port import SystemOpenerPort
from quicklauncher.use_cases.items.add_item import AddItemUseCase
from quicklauncher.use_cases.items.edit_items import (
    ClearItemsUseCase,
    RemoveItemUseCase,
    ReorderItemsUseCase,
    UpdateItemUseCase,
)
from quicklauncher.use_cases.items.list_items import ListItemsUseCase
from quicklauncher.use_cases.items.open_item import OpenItemUseCase, RevealItemUseCase
from quicklauncher.use_cases.targets.classify_target import ClassifyTargetUseCase
from quicklauncher.use_cases.targets.dispatch_target import DispatchTargetUseCase
from quicklauncher.utils.workspace import WorkspaceManager, get_workspace_manager


def create_command_runner(
    platform: str,
    spawner: ProcessSpawnerPort,
    terminals: list[str],
    logger: Optional[logging.Logger] = None,
    grace_period: float = 0.0,
) -> CommandRunnerPort:
    """Pick the command execution strategy for a sys.platform value."""
    if platform.startswith("win"):
        return WindowsCommandRunner(spawner, logger)
    if platform == "darwin":
        return MacCommandRunner(spawner, logger)
    return LinuxCommandRunner(
        spawner, resolve_terminal_candidates(terminals), logger, grace_period
    )


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None, platform: Optional[str] = None):
        self._instances = {}
        self._logger = logging.getLogger(__name__)
        self._settings = settings or default_settings
        self._platform = platform or sys.platform

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def platform(self) -> str:
        return self._platform

    def get_process_spawner(self) -> ProcessSpawnerPort:
        if "process_spawner" not in self._instances:
            self._instances["process_spawner"] = SubprocessSpawner(self._logger)
        return self._instances["process_spawner"]

    def get_system_opener(self) -> SystemOpenerPort:
        """
        Get the OS default-handler adapter instance.

        Returns:
            SystemOpenerPort implementation
        """
        if "system_opener" not in self._instances:
            self._instances["system_opener"] = LocalSystemOpener(
                self.get_process_spawner(), self._logger, platform=self._platform
            )
        return self._instances["system_opener"]

    def get_workspace_manager(self) -> WorkspaceManager:
        """
        Get the workspace manager. The process-wide one unless settings were overridden.
        """
        if "workspace_manager" not in self._instances:
            if self._settings is default_settings:
                manager = get_workspace_manager()
            else:
                manager = WorkspaceManager(
                    self._settings.workspace_root,
                    self._settings.workspace_dirname,
                    self._logger,
                )
            self._instances["workspace_manager"] = manager
        return self._instances["workspace_manager"]

    def get_command_runner(self) -> CommandRunnerPort:
        """
        Get the command execution strategy for the current platform.

        Returns:
            CommandRunnerPort implementation
        """
        if "command_runner" not in self._instances:
            self._instances["command_runner"] = create_command_runner(
                self._platform,
                self.get_process_spawner(),
                self._settings.linux_terminals,
                self._logger,
                self._settings.terminal_grace_seconds,
            )
        return self._instances["command_runner"]

    def get_item_repository(self) -> ItemRepositoryPort:
        """
        Get item repository adapter instance.

        Returns:
            ItemRepositoryPort implementation
        """
        if "item_repository" not in self._instances:
            self._instances["item_repository"] = JsonItemRepository(
                self._settings.items_file, self._logger
            )
        return self._instances["item_repository"]

    def get_classify_target_use_case(self) -> ClassifyTargetUseCase:
        if "classify_target_use_case" not in self._instances:
            self._instances["classify_target_use_case"] = ClassifyTargetUseCase(
                self._logger
            )
        return self._instances["classify_target_use_case"]

    def get_dispatch_target_use_case(self) -> DispatchTargetUseCase:
        """
        Get dispatch target use case with injected dependencies.

        Returns:
            Configured DispatchTargetUseCase
        """
        if "dispatch_target_use_case" not in self._instances:
            self._instances["dispatch_target_use_case"] = DispatchTargetUseCase(
                self.get_system_opener(),
                self.get_command_runner(),
                self.get_workspace_manager(),
                self._logger,
            )
        return self._instances["dispatch_target_use_case"]

    def get_list_items_use_case(self) -> ListItemsUseCase:
        if "list_items_use_case" not in self._instances:
            self._instances["list_items_use_case"] = ListItemsUseCase(
                self.get_item_repository(), self._logger
            )
        return self._instances["list_items_use_case"]

    def get_add_item_use_case(self) -> AddItemUseCase:
        if "add_item_use_case" not in self._instances:
            self._instances["add_item_use_case"] = AddItemUseCase(
                self.get_item_repository(), self._logger
            )
        return self._instances["add_item_use_case"]

    def get_update_item_use_case(self) -> UpdateItemUseCase:
        if "update_item_use_case" not in self._instances:
            self._instances["update_item_use_case"] = UpdateItemUseCase(
                self.get_item_repository(), self._logger
            )
        return self._instances["update_item_use_case"]

    def get_remove_item_use_case(self) -> RemoveItemUseCase:
        if "remove_item_use_case" not in self._instances:
            self._instances["remove_item_use_case"] = RemoveItemUseCase(
                self.get_item_repository(), self._logger
            )
        return self._instances["remove_item_use_case"]

    def get_reorder_items_use_case(self) -> ReorderItemsUseCase:
        if "reorder_items_use_case" not in self._instances:
            self._instances["reorder_items_use_case"] = ReorderItemsUseCase(
                self.get_item_repository(), self._logger
            )
        return self._instances["reorder_items_use_case"]

    def get_clear_items_use_case(self) -> ClearItemsUseCase:
        if "clear_items_use_case" not in self._instances:
            self._instances["clear_items_use_case"] = ClearItemsUseCase(
                self.get_item_repository(), self._logger
            )
        return self._instances["clear_items_use_case"]

    def get_open_item_use_case(self) -> OpenItemUseCase:
        """
        Get open item use case, sharing the dispatcher.

        Returns:
            Configured OpenItemUseCase
        """
        if "open_item_use_case" not in self._instances:
            self._instances["open_item_use_case"] = OpenItemUseCase(
                self.get_item_repository(),
                self.get_dispatch_target_use_case(),
                self._logger,
            )
        return self._instances["open_item_use_case"]

    def get_reveal_item_use_case(self) -> RevealItemUseCase:
        if "reveal_item_use_case" not in self._instances:
            self._instances["reveal_item_use_case"] = RevealItemUseCase(
                self.get_item_repository(), self.get_system_opener(), self._logger
            )
        return self._instances["reveal_item_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
