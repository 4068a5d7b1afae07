"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from quicklauncher.container import container
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


def get_classify_target_uc() -> ClassifyTargetUseCase:
    """
    Get the classify target use case from the container.

    Returns:
        ClassifyTargetUseCase: The classify target use case instance
    """
    return container.get_classify_target_use_case()


def get_dispatch_target_uc() -> DispatchTargetUseCase:
    """
    Get the dispatch target use case from the container.

    Returns:
        DispatchTargetUseCase: The dispatch target use case instance
    """
    return container.get_dispatch_target_use_case()


def get_list_items_uc() -> ListItemsUseCase:
    return container.get_list_items_use_case()


def get_add_item_uc() -> AddItemUseCase:
    return container.get_add_item_use_case()


def get_update_item_uc() -> UpdateItemUseCase:
    return container.get_update_item_use_case()


def get_remove_item_uc() -> RemoveItemUseCase:
    return container.get_remove_item_use_case()


def get_reorder_items_uc() -> ReorderItemsUseCase:
    return container.get_reorder_items_use_case()


def get_clear_items_uc() -> ClearItemsUseCase:
    return container.get_clear_items_use_case()


def get_open_item_uc() -> OpenItemUseCase:
    return container.get_open_item_use_case()


def get_reveal_item_uc() -> RevealItemUseCase:
    return container.get_reveal_item_use_case()
