import logging
from typing import Optional, Sequence

from typing_extensions import override

from quicklauncher.adapters.commands.base_command_runner import BaseCommandRunner
from quicklauncher.adapters.commands.script_files import posix_script_body, write_script
from quicklauncher.entities.Execution import ExecutionRequest, LaunchPlan
from quicklauncher.entities.TerminalCandidate import (
    KNOWN_TERMINALS,
    TerminalCandidate,
)
from quicklauncher.ports.system.process_spawner_port import ProcessSpawnerPort
from quicklauncher.utils.escaping import quote_shell


def render_terminal_plans(
    candidates: Sequence[TerminalCandidate],
    request: ExecutionRequest,
    shell_line: str,
    script_path: Optional[str] = None,
) -> list[LaunchPlan]:
    """One launch plan per candidate, in priority order."""
    return [
        LaunchPlan(
            launcher=candidate.name,
            args=candidate.render(shell_line),
            cwd=request.workspace_dir,
            script_path=script_path,
            watch_exit=True,
        )
        for candidate in candidates
    ]


class LinuxCommandRunner(BaseCommandRunner):
    """Runs commands in the first terminal emulator that starts.

    There is no standard terminal on Linux, so the configured candidates are tried in
    order until one of them spawns. A candidate that exits with an error within
    ``grace_period`` seconds (no display, broken install) hands over to the next one.
    """

    platform_name = "Linux"

    def __init__(
        self,
        spawner: ProcessSpawnerPort,
        candidates: Optional[Sequence[TerminalCandidate]] = None,
        logger: Optional[logging.Logger] = None,
        grace_period: float = 0.0,
    ) -> None:
        super().__init__(spawner, logger, grace_period)
        self._candidates = list(candidates or KNOWN_TERMINALS.values())

    @property
    def candidates(self) -> list[TerminalCandidate]:
        return list(self._candidates)

    @override
    def prepare(self, request: ExecutionRequest) -> list[LaunchPlan]:
        script_path = None
        if request.is_multiline:
            script_path = write_script(
                request.workspace_dir,
                posix_script_body(request.workspace_dir, request.command_text),
                ".sh",
                executable=True,
            )
            self._logger.debug(f"Wrote script file {script_path}")
            shell_line = quote_shell(script_path)
        else:
            shell_line = f"cd {quote_shell(request.workspace_dir)} && {request.command_text}"

        return render_terminal_plans(self._candidates, request, shell_line, script_path)
