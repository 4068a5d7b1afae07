"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import threading
from unittest.mock import MagicMock

import pytest

from quicklauncher.config.settings import Settings
from quicklauncher.container import DependencyContainer
from quicklauncher.entities.Execution import LaunchPlan
from quicklauncher.exceptions import SpawnError
from quicklauncher.ports.system.process_spawner_port import ProcessSpawnerPort


class RecordingSpawner(ProcessSpawnerPort):
    """Spawner double: records every plan and fails for the configured launchers.

    ``exit_codes`` maps a launcher to the status its process reports to ``wait_exit``;
    launchers not listed keep running.
    """

    def __init__(
        self, failing: tuple[str, ...] = (), exit_codes: dict[str, int] | None = None
    ) -> None:
        self.failing = set(failing)
        self.exit_codes = dict(exit_codes or {})
        self.plans: list[LaunchPlan] = []
        self._pids: dict[int, str] = {}
        self._lock = threading.Lock()

    def spawn(self, plan: LaunchPlan) -> int:
        with self._lock:
            self.plans.append(plan)
            if plan.launcher in self.failing:
                raise SpawnError(f"{plan.launcher}: No such file or directory")
            pid = 4242 + len(self.plans)
            self._pids[pid] = plan.launcher
        return pid

    def wait_exit(self, pid: int, timeout: float) -> int | None:
        with self._lock:
            launcher = self._pids.pop(pid, None)
        return self.exit_codes.get(launcher) if launcher else None

    @property
    def launchers(self) -> list[str]:
        return [p.launcher for p in self.plans]


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory with a file and a subdirectory.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "notes.txt"), "w") as f:
            f.write("This is a test file.")

        with open(os.path.join(temp_dir, "example.com"), "w") as f:
            f.write("a file named like a domain")

        os.makedirs(os.path.join(temp_dir, "projects"))

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def spawner():
    return RecordingSpawner()


@pytest.fixture
def make_spawner():
    """Factory for spawners failing to start the given launcher names."""
    return lambda *failing, exit_codes=None: RecordingSpawner(tuple(failing), exit_codes)


@pytest.fixture
def test_settings(tmp_path, monkeypatch):
    """
    Settings pointing data and workspace at a temporary directory.
    """
    monkeypatch.setenv("QL_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("QL_WORKSPACE_ROOT", str(tmp_path))
    monkeypatch.setenv("QL_WORKSPACE_DIRNAME", "launcher-app-temp")
    monkeypatch.delenv("QL_LINUX_TERMINALS", raising=False)
    return Settings()


@pytest.fixture
def dependency_container(test_settings, mock_logger, spawner):
    """
    Create a Linux dependency container with isolated storage and a recording spawner.

    Returns:
        DependencyContainer instance
    """
    container = DependencyContainer(settings=test_settings, platform="linux")
    container._logger = mock_logger
    container._instances["process_spawner"] = spawner
    return container
