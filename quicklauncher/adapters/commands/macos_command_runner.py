from typing_extensions import override

from quicklauncher.adapters.commands.base_command_runner import BaseCommandRunner
from quicklauncher.adapters.commands.script_files import posix_script_body, write_script
from quicklauncher.entities.Execution import ExecutionRequest, LaunchPlan
from quicklauncher.utils.escaping import escape_applescript_string, quote_shell

TERMINAL_APP = "Terminal"


def terminal_do_script(shell_line: str, app: str = TERMINAL_APP) -> str:
    """AppleScript statement asking the terminal app to run a shell line."""
    return f'tell application "{app}" to do script "{escape_applescript_string(shell_line)}"'


class MacCommandRunner(BaseCommandRunner):
    """Runs commands in Terminal.app through osascript."""

    platform_name = "macOS"

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

        return [
            LaunchPlan(
                launcher=TERMINAL_APP,
                args=["osascript", "-e", terminal_do_script(shell_line)],
                cwd=request.workspace_dir,
                script_path=script_path,
            )
        ]
