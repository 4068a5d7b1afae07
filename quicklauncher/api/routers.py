"""
FastAPI router definitions for the API endpoints.
"""

import sys

from fastapi import APIRouter, HTTPException, Query

from quicklauncher import __version__
from quicklauncher.api.dependencies import (
    get_add_item_uc,
    get_classify_target_uc,
    get_clear_items_uc,
    get_dispatch_target_uc,
    get_list_items_uc,
    get_open_item_uc,
    get_remove_item_uc,
    get_reorder_items_uc,
    get_reveal_item_uc,
    get_update_item_uc,
)
from quicklauncher.api.schemas import (
    AppInfoResponse,
    ClassifyResponse,
    DispatchResponse,
    ErrorResponse,
    ItemInfo,
    ItemListResponse,
    ItemRequest,
    OpenTargetRequest,
    ReorderRequest,
)
from quicklauncher.container import container
from quicklauncher.entities.Target import Target
from quicklauncher.exceptions import (
    BaseAppError,
    DuplicateItemError,
    ItemNotFoundError,
)

router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}}
_ITEM_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def _http_error(e: BaseAppError) -> HTTPException:
    """Map a domain error to an HTTP error."""
    if isinstance(e, ItemNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, DuplicateItemError):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


@router.get("/targets/classify", response_model=ClassifyResponse)
def classify_target(
    raw: str = Query("", description="Path, URL or command to classify"),
):
    """
    Classify a raw string. Never fails: unusable input is reported as 'unknown'.
    """
    kind = get_classify_target_uc().execute(raw)
    return ClassifyResponse(raw=raw, kind=kind)


@router.post("/targets/open", response_model=DispatchResponse, responses=_ERRORS)
def open_target(body: OpenTargetRequest):
    """
    Open a path or URL, or run a command, without storing it.

    Returns as soon as the launch is issued; the launched program is not awaited.
    """
    if body.kind is None:
        target = get_classify_target_uc().to_target(body.raw, display_name=body.name)
    else:
        target = Target(raw=body.raw, kind=body.kind, display_name=body.name)
    if not target.kind.dispatchable:
        raise HTTPException(status_code=400, detail=f"Cannot open '{body.raw}'")
    result = get_dispatch_target_uc().execute(target)
    return DispatchResponse.from_result(result)


@router.get("/items", response_model=ItemListResponse, responses=_ERRORS)
def list_items():
    """
    List the stored items in display order.
    """
    try:
        items = get_list_items_uc().execute()
        return ItemListResponse(
            items=[ItemInfo.from_entity(i, item) for i, item in enumerate(items)]
        )
    except BaseAppError as e:
        raise _http_error(e)


@router.post("/items", response_model=ItemInfo, status_code=201, responses=_ITEM_ERRORS)
def add_item(body: ItemRequest):
    """
    Register a new item. The type is classified from the path when omitted.
    """
    try:
        index, item = get_add_item_uc().execute(body.path, type=body.type, name=body.name)
        return ItemInfo.from_entity(index, item)
    except BaseAppError as e:
        raise _http_error(e)


@router.put("/items/order", response_model=ItemListResponse, responses=_ERRORS)
def reorder_items(body: ReorderRequest):
    """
    Reorder the list. 'order' lists the current indices in their new order.
    """
    try:
        items = get_reorder_items_uc().execute(body.order)
        return ItemListResponse(
            items=[ItemInfo.from_entity(i, item) for i, item in enumerate(items)]
        )
    except BaseAppError as e:
        raise _http_error(e)


@router.put("/items/{index}", response_model=ItemInfo, responses=_ITEM_ERRORS)
def update_item(index: int, body: ItemRequest):
    """
    Replace the item at the given index.
    """
    try:
        item = get_update_item_uc().execute(
            index, body.path, type=body.type, name=body.name
        )
        return ItemInfo.from_entity(index, item)
    except BaseAppError as e:
        raise _http_error(e)


@router.delete("/items/{index}", response_model=ItemInfo, responses=_ITEM_ERRORS)
def remove_item(index: int):
    """
    Remove the item at the given index and return it.
    """
    try:
        item = get_remove_item_uc().execute(index)
        return ItemInfo.from_entity(index, item)
    except BaseAppError as e:
        raise _http_error(e)


@router.delete("/items", status_code=204, responses=_ERRORS)
def clear_items():
    """
    Remove every item.
    """
    try:
        get_clear_items_uc().execute()
    except BaseAppError as e:
        raise _http_error(e)


@router.post("/items/{index}/open", response_model=DispatchResponse, responses=_ITEM_ERRORS)
def open_item(index: int):
    """
    Open or run the item at the given index.
    """
    try:
        result = get_open_item_uc().execute(index)
        return DispatchResponse.from_result(result)
    except BaseAppError as e:
        raise _http_error(e)


@router.post("/items/{index}/reveal", response_model=ItemInfo, responses=_ITEM_ERRORS)
def reveal_item(index: int):
    """
    Show a file or folder item in the platform file manager.
    """
    try:
        item = get_reveal_item_uc().execute(index)
        return ItemInfo.from_entity(index, item)
    except BaseAppError as e:
        raise _http_error(e)


@router.get("/info", response_model=AppInfoResponse)
def app_info():
    """
    Version, platform and storage locations.
    """
    return AppInfoResponse(
        version=__version__,
        platform=sys.platform,
        storage_path=container.get_item_repository().storage_path(),
        workspace_dir=container.get_workspace_manager().path,
    )
