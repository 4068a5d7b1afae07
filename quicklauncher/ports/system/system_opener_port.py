"""
System opener port interface: hand paths and URLs to the OS default handlers.
"""

from abc import ABC, abstractmethod


class SystemOpenerPort(ABC):
    """Port interface for the OS "open with default application" facilities."""

    @abstractmethod
    def open_path(self, path: str) -> None:
        """
        Open a file or folder with its default application.

        Raises:
            LaunchError: If the OS handler cannot be started
        """
        pass

    @abstractmethod
    def open_url(self, url: str) -> None:
        """
        Open a URL (any scheme) with the default browser or registered handler.

        Raises:
            LaunchError: If no handler could be started
        """
        pass

    @abstractmethod
    def reveal(self, path: str) -> None:
        """
        Show a file or folder selected in the platform file manager.

        Raises:
            LaunchError: If the file manager cannot be started
        """
        pass
