"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from quicklauncher.entities.Item import LauncherItem
from quicklauncher.entities.Target import DispatchResult, TargetKind


class ClassifyResponse(BaseModel):
    """Schema for a classification result."""

    raw: str = Field(..., description="Input that was classified")
    kind: TargetKind = Field(..., description="file, folder, url, command or unknown")


class OpenTargetRequest(BaseModel):
    """Schema for opening an arbitrary target."""

    raw: str = Field(..., description="Path, URL or shell command")
    kind: Optional[TargetKind] = Field(
        None, description="Explicit kind; classified from 'raw' when omitted"
    )
    name: Optional[str] = Field(None, description="Optional display label")


class DispatchResponse(BaseModel):
    """Schema for a dispatch outcome. 'ok' means a launch was issued."""

    kind: TargetKind = Field(..., description="Kind the target was dispatched as")
    ok: bool = Field(..., description="Whether the launch was issued")
    action: str = Field(..., description="open_path, open_url, run_command or none")
    detail: Optional[str] = Field(None, description="Opened path/URL or terminal used")
    error: Optional[str] = Field(None, description="Error message when ok is false")

    @classmethod
    def from_result(cls, result: DispatchResult):
        """Create a DispatchResponse schema from a DispatchResult."""
        return cls(**result.get_details())


class ItemInfo(BaseModel):
    """Schema for a stored launcher item."""

    index: int = Field(..., description="Position in the list")
    path: str = Field(..., description="Path, URL or shell command")
    type: Optional[TargetKind] = Field(None, description="Stored kind")
    name: Optional[str] = Field(None, description="Display label")

    @classmethod
    def from_entity(cls, index: int, item: LauncherItem):
        """Create an ItemInfo schema from a LauncherItem entity."""
        data = item.to_dict()
        return cls(index=index, path=data["path"], type=data["type"], name=item.name)


class ItemRequest(BaseModel):
    """Schema for creating or replacing an item."""

    path: str = Field(..., description="Path, URL or shell command")
    type: Optional[TargetKind] = Field(
        None, description="Explicit kind; classified from 'path' when omitted"
    )
    name: Optional[str] = Field(None, description="Optional display label")


class ItemListResponse(BaseModel):
    """Schema for the item list."""

    items: List[ItemInfo] = Field(..., description="Items in display order")


class ReorderRequest(BaseModel):
    """Schema for reordering items."""

    order: List[int] = Field(
        ..., description="Old indices in their new order, e.g. [2, 0, 1]"
    )


class AppInfoResponse(BaseModel):
    """Schema for application information."""

    version: str = Field(..., description="Application version")
    platform: str = Field(..., description="sys.platform of the running process")
    storage_path: str = Field(..., description="Location of items.json")
    workspace_dir: str = Field(..., description="Working directory for commands")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
