"""
Tests for the Windows command strategy.
"""

import os

import pytest

from quicklauncher.adapters.commands.windows_command_runner import (
    WindowsCommandRunner,
    build_windows_command_line,
)
from quicklauncher.entities.Execution import ExecutionRequest

WORKSPACE = r"C:\Users\Ann Lee\AppData\Local\Temp\launcher-app-temp"


class TestBuildWindowsCommandLine:
    def test_default_keeps_window_open(self):
        line = build_windows_command_line(ExecutionRequest("dir /b", WORKSPACE))
        assert line == f'cmd.exe /K "cd /d "{WORKSPACE}" && dir /b"'

    @pytest.mark.parametrize(
        "command, flag, rest",
        [
            ("/C ping localhost", "C", "ping localhost"),
            ("/c ping localhost", "C", "ping localhost"),
            ("/k   ipconfig", "K", "ipconfig"),
        ],
    )
    def test_leading_flag_honored(self, command, flag, rest):
        line = build_windows_command_line(ExecutionRequest(command, WORKSPACE))
        assert line == f'cmd.exe /{flag} "cd /d "{WORKSPACE}" && {rest}"'

    def test_command_text_not_rewritten(self):
        command = 'echo "a & b" | findstr a'
        line = build_windows_command_line(ExecutionRequest(command, WORKSPACE))
        assert line.endswith(f'&& {command}"')


class TestWindowsCommandRunner:
    def test_single_line_plan(self, tmp_path, spawner, mock_logger):
        runner = WindowsCommandRunner(spawner, mock_logger)
        result = runner.run(ExecutionRequest("dir", str(tmp_path)))

        assert result.ok
        plan = spawner.plans[0]
        assert plan.new_console
        assert plan.cwd == str(tmp_path)
        assert isinstance(plan.args, str)

    def test_multiline_writes_batch_verbatim(self, tmp_path, spawner, mock_logger):
        command = "echo one\r\necho two\r\npause"
        runner = WindowsCommandRunner(spawner, mock_logger)

        result = runner.run(ExecutionRequest(command, str(tmp_path)))

        assert result.ok
        assert result.script_path.endswith(".bat")
        assert os.path.dirname(result.script_path) == str(tmp_path)
        with open(result.script_path, encoding="utf-8", newline="") as f:
            assert f.read() == command
        assert spawner.plans[0].args == f'cmd.exe /K "{result.script_path}"'
        assert spawner.plans[0].new_console
