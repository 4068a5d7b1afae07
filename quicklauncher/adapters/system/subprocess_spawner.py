import logging
import subprocess
import threading
from typing import Optional

from typing_extensions import override

from quicklauncher.entities.Execution import LaunchPlan
from quicklauncher.exceptions import SpawnError
from quicklauncher.ports.system.process_spawner_port import ProcessSpawnerPort

# Windows process creation flags; spelled out so the module imports on every OS
CREATE_NEW_CONSOLE = 0x00000010
CREATE_NEW_PROCESS_GROUP = 0x00000200


class SubprocessSpawner(ProcessSpawnerPort):
    """Fire-and-forget process spawning on top of subprocess.Popen."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._watched: dict[int, subprocess.Popen] = {}
        self._lock = threading.Lock()

    @override
    def spawn(self, plan: LaunchPlan) -> int:
        kwargs: dict[str, object] = {"cwd": plan.cwd}
        if plan.new_console:
            # no std handles: the new console must get its own
            kwargs["creationflags"] = CREATE_NEW_CONSOLE | CREATE_NEW_PROCESS_GROUP
        else:
            kwargs["stdin"] = subprocess.DEVNULL
            kwargs["stdout"] = subprocess.DEVNULL
            kwargs["stderr"] = subprocess.DEVNULL
            kwargs["start_new_session"] = True

        try:
            proc = subprocess.Popen(plan.args, **kwargs)  # type: ignore[call-overload]
        except (OSError, ValueError) as e:
            raise SpawnError(f"Failed to start {plan.launcher}: {e}") from e

        if plan.watch_exit:
            with self._lock:
                self._watched[proc.pid] = proc

        self._logger.info(f"Launched {plan.launcher} (pid={proc.pid})")
        return proc.pid

    @override
    def wait_exit(self, pid: int, timeout: float) -> Optional[int]:
        with self._lock:
            proc = self._watched.pop(pid, None)
        if proc is None:
            return None
        try:
            return proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            return None
