import re

from typing_extensions import override

from quicklauncher.adapters.commands.base_command_runner import BaseCommandRunner
from quicklauncher.adapters.commands.script_files import write_script
from quicklauncher.entities.Execution import ExecutionRequest, LaunchPlan
from quicklauncher.utils.escaping import quote_cmd_path

# Leading console-host flag: /K keeps the window open, /C closes it afterwards
CONSOLE_FLAG_RE = re.compile(r"^/([KC])\s*", re.IGNORECASE)


def build_windows_command_line(request: ExecutionRequest) -> str:
    """cmd.exe command line for a single-line command.

    cmd.exe strips the outermost pair of quotes after /K or /C, leaving
    ``cd /d "<workspace>" && <command>`` to run.
    """
    flag = "K"
    command = request.command_text
    match = CONSOLE_FLAG_RE.match(command)
    if match:
        flag = match.group(1).upper()
        command = command[match.end():]
    workspace = quote_cmd_path(request.workspace_dir)
    return f'cmd.exe /{flag} "cd /d {workspace} && {command}"'


class WindowsCommandRunner(BaseCommandRunner):
    """Runs commands in a new, detached cmd.exe console."""

    platform_name = "Windows"

    @override
    def prepare(self, request: ExecutionRequest) -> list[LaunchPlan]:
        if request.is_multiline:
            batch = write_script(request.workspace_dir, request.command_text, ".bat")
            self._logger.debug(f"Wrote batch file {batch}")
            return [
                LaunchPlan(
                    launcher="cmd",
                    args=f"cmd.exe /K {quote_cmd_path(batch)}",
                    cwd=request.workspace_dir,
                    new_console=True,
                    script_path=batch,
                )
            ]

        return [
            LaunchPlan(
                launcher="cmd",
                args=build_windows_command_line(request),
                cwd=request.workspace_dir,
                new_console=True,
            )
        ]
