"""
Tests for the macOS command strategy.
"""

import os
import re
import shlex

from quicklauncher.adapters.commands.macos_command_runner import (
    MacCommandRunner,
    terminal_do_script,
)
from quicklauncher.entities.Execution import ExecutionRequest
from quicklauncher.utils.escaping import quote_shell

DO_SCRIPT_RE = re.compile(r'^tell application "Terminal" to do script "(.*)"$', re.DOTALL)


def decode_do_script(statement: str) -> str:
    """Return the shell line carried by a do-script statement."""
    match = DO_SCRIPT_RE.match(statement)
    assert match, statement
    return re.sub(r"\\(.)", r"\1", match.group(1), flags=re.DOTALL)


class TestMacCommandRunner:
    def test_single_line_plan(self, tmp_path, spawner, mock_logger):
        runner = MacCommandRunner(spawner, mock_logger)
        plans = runner.prepare(ExecutionRequest("ls -la", str(tmp_path)))

        assert len(plans) == 1
        plan = plans[0]
        assert plan.launcher == "Terminal"
        assert plan.args[:2] == ["osascript", "-e"]
        assert decode_do_script(plan.args[2]) == f"cd {quote_shell(str(tmp_path))} && ls -la"

    def test_nested_quoting_survives_both_layers(self, tmp_path, spawner, mock_logger):
        workspace = tmp_path / "we\"ird 'dir"
        workspace.mkdir()
        command = 'echo "it\'s" \\ done'
        runner = MacCommandRunner(spawner, mock_logger)

        plan = runner.prepare(ExecutionRequest(command, str(workspace)))[0]
        shell_line = decode_do_script(plan.args[2])

        prefix, rest = shell_line.split(" && ", 1)
        assert shlex.split(prefix) == ["cd", str(workspace)]
        assert rest == command

    def test_multiline_runs_script(self, tmp_path, spawner, mock_logger):
        runner = MacCommandRunner(spawner, mock_logger)
        result = runner.run(ExecutionRequest("brew update\nbrew upgrade", str(tmp_path)))

        assert result.ok
        assert result.launcher == "Terminal"
        assert result.script_path and os.path.exists(result.script_path)
        assert result.script_path.endswith(".sh")
        shell_line = decode_do_script(spawner.plans[0].args[2])
        assert shlex.split(shell_line) == [result.script_path]

    def test_spawn_failure_has_no_fallback(self, tmp_path, make_spawner, mock_logger):
        spawner = make_spawner("Terminal")
        result = MacCommandRunner(spawner, mock_logger).run(
            ExecutionRequest("ls", str(tmp_path))
        )

        assert not result.ok
        assert result.attempts == 1
        mock_logger.error.assert_called_once()

    def test_do_script_escapes_literal(self):
        assert terminal_do_script('say "hi"') == (
            'tell application "Terminal" to do script "say \\"hi\\""'
        )
