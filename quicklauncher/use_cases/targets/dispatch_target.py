"""
Use case for invoking a classified target.
"""

import logging
from typing import Optional

from quicklauncher.entities.Execution import ExecutionRequest
from quicklauncher.entities.Target import DispatchResult, Target, TargetKind
from quicklauncher.exceptions import LaunchError
from quicklauncher.ports.commands.command_runner_port import CommandRunnerPort
from quicklauncher.ports.system.system_opener_port import SystemOpenerPort
from quicklauncher.utils.urls import normalize_url
from quicklauncher.utils.workspace import WorkspaceManager


class DispatchTargetUseCase:
    """Route a target to "open path", "open URL" or "run command".

    Fire-and-forget: nothing waits for the launched program, and failures are logged
    and reported in the returned DispatchResult instead of being raised.
    """

    def __init__(
        self,
        opener: SystemOpenerPort,
        command_runner: CommandRunnerPort,
        workspace: WorkspaceManager,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            opener: OS default-handler facility for paths and URLs
            command_runner: Platform command execution strategy
            workspace: Shared working directory for commands
            logger: Logger instance to use for logging
        """
        self._opener = opener
        self._command_runner = command_runner
        self._workspace = workspace
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, target: Target) -> DispatchResult:
        """
        Invoke the target according to its kind.

        Args:
            target: Classified target

        Returns:
            DispatchResult describing what was launched
        """
        self._logger.info(f"Dispatching {target}")
        if target.kind in (TargetKind.FILE, TargetKind.FOLDER):
            return self._open_path(target)
        if target.kind is TargetKind.URL:
            return self._open_url(target)
        if target.kind is TargetKind.COMMAND:
            return self._run_command(target)

        self._logger.warning(f"Ignoring non-dispatchable target: {target.raw!r}")
        return DispatchResult(
            kind=target.kind, ok=False, action="none", error="Target kind is unknown"
        )

    def _open_path(self, target: Target) -> DispatchResult:
        try:
            self._opener.open_path(target.raw)
        except LaunchError as e:
            self._logger.error(f"Error opening path: {e}")
            return DispatchResult(target.kind, ok=False, action="open_path", error=str(e))
        return DispatchResult(target.kind, ok=True, action="open_path", detail=target.raw)

    def _open_url(self, target: Target) -> DispatchResult:
        url = normalize_url(target.raw)
        try:
            self._opener.open_url(url)
        except LaunchError as e:
            self._logger.error(f"Error opening URL: {e}")
            return DispatchResult(target.kind, ok=False, action="open_url", error=str(e))
        return DispatchResult(target.kind, ok=True, action="open_url", detail=url)

    def _run_command(self, target: Target) -> DispatchResult:
        try:
            workspace_dir = self._workspace.ensure()
        except OSError as e:
            self._logger.error(f"Cannot create workspace directory: {e}")
            return DispatchResult(target.kind, ok=False, action="run_command", error=str(e))

        request = ExecutionRequest(command_text=target.raw, workspace_dir=workspace_dir)
        result = self._command_runner.run(request)
        if not result.ok:
            return DispatchResult(
                target.kind, ok=False, action="run_command", error=result.error
            )
        return DispatchResult(
            target.kind, ok=True, action="run_command", detail=result.launcher
        )
