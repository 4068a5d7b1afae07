"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ClassificationError(BaseAppError):
    """Exception raised when a target cannot be classified into a dispatchable kind."""

    pass


class LaunchError(BaseAppError):
    """Exception raised for errors while opening a target or running a command."""

    pass


class SpawnError(LaunchError):
    """Exception raised when the OS refuses to start a process."""

    pass


class ScriptWriteError(LaunchError):
    """Exception raised when a temporary script or batch file cannot be written."""

    pass


class ItemRepositoryError(BaseAppError):
    """Exception raised for item storage errors."""

    pass


class ItemNotFoundError(ItemRepositoryError):
    """Exception raised when an item index does not exist."""

    pass


class DuplicateItemError(ItemRepositoryError):
    """Exception raised when an item with the same path is already stored."""

    pass
