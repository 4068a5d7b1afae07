from abc import ABC, abstractmethod
from typing import Optional

from quicklauncher.entities.Execution import LaunchPlan


class ProcessSpawnerPort(ABC):
    @abstractmethod
    def spawn(self, plan: LaunchPlan) -> int:
        """
        Start the process described by the plan without waiting for it.

        Returns:
            PID of the launched process

        Raises:
            SpawnError: If the OS refuses to start the process
        """
        pass

    @abstractmethod
    def wait_exit(self, pid: int, timeout: float) -> Optional[int]:
        """
        Wait up to ``timeout`` seconds for a process spawned with ``watch_exit``.

        Returns:
            The exit status if it ended in time, None if it is still running or
            was not spawned with ``watch_exit``
        """
        pass
