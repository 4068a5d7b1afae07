"""
Command runner port interface: run a command in a new interactive terminal.
"""

from abc import ABC, abstractmethod

from quicklauncher.entities.Execution import ExecutionRequest, ExecutionResult, LaunchPlan


class CommandRunnerPort(ABC):
    """Port interface for the platform-specific command execution strategies."""

    @abstractmethod
    def prepare(self, request: ExecutionRequest) -> list[LaunchPlan]:
        """
        Turn a request into launch plans, in the order they should be tried.

        Multi-line commands are written to a script file here, once.

        Raises:
            ScriptWriteError: If the script file cannot be written
        """
        pass

    @abstractmethod
    def run(self, request: ExecutionRequest) -> ExecutionResult:
        """
        Launch the command in a terminal and return without waiting for it.

        Spawn and script failures are reported in the result, not raised.
        """
        pass
