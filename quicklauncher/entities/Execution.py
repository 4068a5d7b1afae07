"""
Command execution entities: the request handed to a strategy, the launch plans it
produces and the result it reports back.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class ExecutionRequest:
    """A command to run in an interactive terminal.

    Attributes:
        command_text: Command line or multi-line script, used verbatim
        workspace_dir: Existing directory the command runs in
    """

    command_text: str
    workspace_dir: str

    @property
    def is_multiline(self) -> bool:
        return "\n" in self.command_text or "\r" in self.command_text


@dataclass(frozen=True)
class LaunchPlan:
    """A ready-to-spawn process description.

    ``args`` is an argv list on POSIX. On Windows it is a raw command line, because
    cmd.exe applies its own quote rules instead of the CommandLineToArgvW ones that
    subprocess.list2cmdline targets.
    """

    launcher: str
    args: Union[list[str], str]
    cwd: str
    new_console: bool = False
    script_path: Optional[str] = None
    # keep the process handle so its early exit status can be checked
    watch_exit: bool = False


@dataclass
class ExecutionResult:
    """What a command strategy did. ``ok`` means a terminal was launched, not that the
    command inside it succeeded."""

    ok: bool
    launcher: Optional[str] = None
    attempts: int = 0
    script_path: Optional[str] = None
    error: Optional[str] = None
    tried: list[str] = field(default_factory=list)
