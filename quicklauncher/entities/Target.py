"""
Target domain entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TargetKind(str, Enum):
    """Kind of an invocable target. Values match the stored item "type" field."""

    FILE = "file"
    FOLDER = "folder"
    URL = "url"
    COMMAND = "command"
    UNKNOWN = "unknown"

    @property
    def dispatchable(self) -> bool:
        return self is not TargetKind.UNKNOWN

    @classmethod
    def parse(cls, value: object) -> "TargetKind":
        """Map a stored type string (any case) to a kind; anything else is UNKNOWN."""
        if isinstance(value, TargetKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Target:
    """One classified, invocable entity: a path, a URL or a shell command."""

    raw: str
    kind: TargetKind
    display_name: Optional[str] = None

    def __str__(self) -> str:
        label = f", name='{self.display_name}'" if self.display_name else ""
        return f"Target(kind={self.kind.value}, raw='{self.raw}'{label})"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a dispatch call. Produced without waiting for the launched process."""

    kind: TargetKind
    ok: bool
    action: str
    detail: Optional[str] = None
    error: Optional[str] = None

    def get_details(self) -> dict[str, Optional[str] | bool]:
        return {
            "kind": self.kind.value,
            "ok": self.ok,
            "action": self.action,
            "detail": self.detail,
            "error": self.error,
        }
