"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileTreeError(BaseAppError):
    """Exception raised when a file tree listing fails."""

    pass


class NotFoundError(FileTreeError):
    """Exception raised when a path segment does not exist in the active namespace."""

    pass


class InvalidPathError(FileTreeError):
    """Exception raised when a path segment escapes the active namespace root."""

    pass


class UnsupportedContainerError(FileTreeError):
    """Exception raised when a recognized container cannot be expanded."""

    pass


class NotExpandableError(FileTreeError):
    """Exception raised when listing an entry that is neither a directory nor a container."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
