"""
Shared run loop for the command execution strategies.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from quicklauncher.entities.Execution import ExecutionRequest, ExecutionResult, LaunchPlan
from quicklauncher.exceptions import ScriptWriteError, SpawnError
from quicklauncher.ports.commands.command_runner_port import CommandRunnerPort
from quicklauncher.ports.system.process_spawner_port import ProcessSpawnerPort


@dataclass
class LaunchSelection:
    """Outcome of trying launch plans in order."""

    index: Optional[int]
    error: Optional[str] = None
    attempts: int = 0
    tried: list[str] = field(default_factory=list)
    # return value of the successful launch call
    value: object = None

    @property
    def ok(self) -> bool:
        return self.index is not None


def select_first_launch(
    plans: Sequence[LaunchPlan], launch: Callable[[LaunchPlan], object]
) -> LaunchSelection:
    """Try each plan in order and stop at the first that starts.

    ``launch`` signals failure by raising SpawnError; any other exception propagates.
    Returns the index of the plan that started, or None with the last error.
    """
    selection = LaunchSelection(index=None)
    for i, plan in enumerate(plans):
        selection.attempts += 1
        selection.tried.append(plan.launcher)
        try:
            value = launch(plan)
        except SpawnError as e:
            selection.error = str(e)
            continue
        selection.index = i
        selection.error = None
        selection.value = value
        return selection
    if not plans:
        selection.error = "No launch plan available"
    return selection


class BaseCommandRunner(CommandRunnerPort):
    """Runs the plans produced by ``prepare`` through the spawner, first success wins.

    With a positive ``grace_period``, a plan spawned with ``watch_exit`` that exits
    with a non-zero status inside that window counts as failed too. The check runs in
    a background thread, so ``run`` still returns as soon as the first process starts;
    on failure the remaining plans are tried from that thread.
    """

    platform_name = "generic"

    def __init__(
        self,
        spawner: ProcessSpawnerPort,
        logger: Optional[logging.Logger] = None,
        grace_period: float = 0.0,
    ) -> None:
        self._spawner = spawner
        self._logger = logger or logging.getLogger(__name__)
        self._grace_period = grace_period
        self._checks: list[threading.Thread] = []
        self._checks_lock = threading.Lock()

    @property
    def grace_period(self) -> float:
        return self._grace_period

    def _launch(self, plan: LaunchPlan) -> object:
        try:
            return self._spawner.spawn(plan)
        except SpawnError as e:
            self._logger.warning(f"{plan.launcher} failed to start: {e}")
            raise

    def _exit_error(self, plan: LaunchPlan, pid: object) -> Optional[SpawnError]:
        code = self._spawner.wait_exit(pid, self._grace_period)  # type: ignore[arg-type]
        if not code:
            return None
        return SpawnError(f"{plan.launcher} exited with status {code}")

    def _launch_checked(self, plan: LaunchPlan) -> object:
        pid = self._launch(plan)
        error = self._exit_error(plan, pid)
        if error is not None:
            self._logger.warning(f"{error}")
            raise error
        return pid

    def _check_started(self, plans: Sequence[LaunchPlan], index: int, pid: object) -> None:
        error = self._exit_error(plans[index], pid)
        if error is None:
            return
        self._logger.warning(f"{error}, trying the next candidate")

        remaining = plans[index + 1:]
        selection = select_first_launch(remaining, self._launch_checked)
        if not selection.ok:
            self._logger.error(
                f"Could not open a terminal on {self.platform_name} "
                f"(tried: {', '.join([plans[index].launcher, *selection.tried])}): "
                f"{selection.error or error}"
            )
            return
        launched = remaining[selection.index]  # type: ignore[index]
        self._logger.info(f"Command started in {launched.launcher} after fallback")

    def _start_check(self, plans: Sequence[LaunchPlan], index: int, pid: object) -> None:
        thread = threading.Thread(
            target=self._check_started,
            args=(plans, index, pid),
            name=f"launch-check-{plans[index].launcher}",
            daemon=True,
        )
        with self._checks_lock:
            self._checks = [t for t in self._checks if t.is_alive()]
            self._checks.append(thread)
        thread.start()

    def wait_for_checks(self, timeout: Optional[float] = None) -> None:
        """Block until pending exit checks and their fallbacks are done."""
        with self._checks_lock:
            checks = list(self._checks)
        for thread in checks:
            thread.join(timeout)

    def run(self, request: ExecutionRequest) -> ExecutionResult:
        try:
            plans = self.prepare(request)
        except ScriptWriteError as e:
            self._logger.error(f"Command aborted: {e}")
            return ExecutionResult(ok=False, error=str(e))

        script_path = plans[0].script_path if plans else None

        selection = select_first_launch(plans, self._launch)
        if not selection.ok:
            self._logger.error(
                f"Could not open a terminal on {self.platform_name} "
                f"(tried: {', '.join(selection.tried) or 'nothing'}): {selection.error}"
            )
            return ExecutionResult(
                ok=False,
                attempts=selection.attempts,
                script_path=script_path,
                error=selection.error,
                tried=selection.tried,
            )

        launched = plans[selection.index]  # type: ignore[index]
        self._logger.info(
            f"Command started in {launched.launcher} "
            f"(attempt {selection.attempts}/{len(plans)})"
        )
        if launched.watch_exit and self._grace_period > 0:
            self._start_check(plans, selection.index, selection.value)  # type: ignore[arg-type]
        return ExecutionResult(
            ok=True,
            launcher=launched.launcher,
            attempts=selection.attempts,
            script_path=script_path,
            tried=selection.tried,
        )
