"""
Launcher item domain entity.
"""

from typing import Any, Optional

from quicklauncher.entities.Target import Target, TargetKind


class LauncherItem:
    """
    A registered entry of the launcher list: a raw target plus its stored type.
    """

    def __init__(
        self,
        path: str,
        type: Optional[TargetKind | str] = None,
        name: Optional[str] = None,
    ):
        """
        Initialize the LauncherItem entity.

        Args:
            path: Raw target (filesystem path, URL or shell command)
            type: Stored target kind; None when it still has to be classified
            name: Optional display label

        Raises:
            ValueError: If path is empty or not a string
        """
        if not path or not isinstance(path, str) or not path.strip():
            raise ValueError("Item path must be a non-empty string")

        self.path = path
        self.kind: Optional[TargetKind] = TargetKind.parse(type) if type else None
        self.name = name or None

    def to_target(self) -> Target:
        """Build the dispatchable Target. The kind must already be resolved."""
        return Target(
            raw=self.path,
            kind=self.kind or TargetKind.UNKNOWN,
            display_name=self.name,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "path": self.path,
            "type": self.kind.value if self.kind else None,
        }
        if self.name:
            data["name"] = self.name
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LauncherItem":
        """Create an item from its stored JSON form."""
        return cls(path=data.get("path", ""), type=data.get("type"), name=data.get("name"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LauncherItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        kind = self.kind.value if self.kind else "?"
        label = f", name='{self.name}'" if self.name else ""
        return f"LauncherItem(type={kind}, path='{self.path}'{label})"

    def __repr__(self) -> str:
        return f"LauncherItem(path={self.path!r}, type={self.kind!r}, name={self.name!r})"
