from __future__ import annotations

import logging
import os
from typing import Optional

from quicklauncher.config.settings import settings

"""Shared working directory for launched commands and generated scripts.

Environment variables:
- QL_WORKSPACE_ROOT: parent directory. Defaults to the OS temp root.
- QL_WORKSPACE_DIRNAME: name of the workspace directory. Defaults to 'launcher-app-temp'.

The directory is created lazily, once per process, and never cleaned up.
"""


class WorkspaceManager:
    def __init__(
        self, root: str, dirname: str, logger: Optional[logging.Logger] = None
    ) -> None:
        self._path = os.path.abspath(os.path.join(os.path.expanduser(root), dirname))
        self._ready = False
        self._logger = logger or logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return self._path

    def ensure(self) -> str:
        """Create the workspace if needed and return its absolute path.

        Safe to call concurrently: makedirs with exist_ok is idempotent.

        Raises:
            OSError: If the directory cannot be created
        """
        if self._ready and os.path.isdir(self._path):
            return self._path
        os.makedirs(self._path, exist_ok=True)
        if not self._ready:
            self._logger.debug(f"Workspace directory ready: {self._path}")
        self._ready = True
        return self._path


_default_manager: Optional[WorkspaceManager] = None


def get_workspace_manager() -> WorkspaceManager:
    """Process-wide workspace manager built from settings on first use."""
    global _default_manager
    if _default_manager is None:
        _default_manager = WorkspaceManager(
            settings.workspace_root, settings.workspace_dirname
        )
    return _default_manager


def ensure_workspace() -> str:
    return get_workspace_manager().ensure()
