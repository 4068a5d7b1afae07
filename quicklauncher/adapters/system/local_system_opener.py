import logging
import os
import sys
import webbrowser
from typing import Optional

from typing_extensions import override

from quicklauncher.entities.Execution import LaunchPlan
from quicklauncher.exceptions import LaunchError, SpawnError
from quicklauncher.ports.system.process_spawner_port import ProcessSpawnerPort
from quicklauncher.ports.system.system_opener_port import SystemOpenerPort


class LocalSystemOpener(SystemOpenerPort):
    """Opens paths and URLs with the platform default handlers.

    - macOS: ``open`` (``open -R`` to reveal)
    - Windows: ``os.startfile`` (``explorer /select,`` to reveal)
    - Linux/Unix: ``xdg-open`` (the parent directory to reveal)
    """

    def __init__(
        self,
        spawner: ProcessSpawnerPort,
        logger: Optional[logging.Logger] = None,
        platform: Optional[str] = None,
    ) -> None:
        self._spawner = spawner
        self._logger = logger or logging.getLogger(__name__)
        self._platform = platform or sys.platform

    @property
    def _is_windows(self) -> bool:
        return self._platform.startswith("win")

    def _handler_plan(self, launcher: str, args: str | list[str]) -> LaunchPlan:
        cwd = os.path.expanduser("~")
        return LaunchPlan(launcher=launcher, args=args, cwd=cwd)

    def _startfile(self, target: str) -> None:
        try:
            os.startfile(target)  # type: ignore[attr-defined]
        except OSError as e:
            raise LaunchError(f"Failed to open {target}: {e}") from e

    @override
    def open_path(self, path: str) -> None:
        self._logger.info(f"Opening path: {path}")
        if self._is_windows:
            self._startfile(path)
            return
        if self._platform == "darwin":
            plan = self._handler_plan("open", ["open", path])
        else:
            plan = self._handler_plan("xdg-open", ["xdg-open", path])
        try:
            self._spawner.spawn(plan)
        except SpawnError as e:
            raise LaunchError(f"Failed to open {path}: {e}") from e

    @override
    def open_url(self, url: str) -> None:
        self._logger.info(f"Opening URL: {url}")
        if self._is_windows:
            self._startfile(url)
            return
        launcher = "open" if self._platform == "darwin" else "xdg-open"
        try:
            self._spawner.spawn(self._handler_plan(launcher, [launcher, url]))
            return
        except SpawnError as e:
            self._logger.warning(f"{launcher} unavailable, falling back to webbrowser: {e}")

        if not webbrowser.open(url):
            raise LaunchError(f"No handler available to open URL: {url}")

    @override
    def reveal(self, path: str) -> None:
        self._logger.info(f"Revealing in file manager: {path}")
        if self._is_windows:
            # explorer.exe parses "/select," itself; a raw command line keeps the quotes intact
            plan = self._handler_plan(
                "explorer", f'explorer /select,"{os.path.normpath(path)}"'
            )
        elif self._platform == "darwin":
            plan = self._handler_plan("open", ["open", "-R", path])
        else:
            parent = path if os.path.isdir(path) else os.path.dirname(os.path.abspath(path))
            plan = self._handler_plan("xdg-open", ["xdg-open", parent])
        try:
            self._spawner.spawn(plan)
        except SpawnError as e:
            raise LaunchError(f"Failed to reveal {path}: {e}") from e
