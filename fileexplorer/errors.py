"""Exceptions raised while revealing a path in the file manager."""
from __future__ import annotations

from typing import Optional


class FileExplorerError(Exception):
    """Base exception for all file explorer failures."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class PathAccessError(FileExplorerError):
    """Raised when the target path cannot be stat'd."""


class UnsupportedPlatformError(FileExplorerError):
    """Raised when the running OS has no file manager strategy."""


class StrategyResolutionError(FileExplorerError):
    """Raised when a strategy cannot compute its launch arguments."""


class ProcessStartError(FileExplorerError):
    """Raised when the file manager process could not be spawned."""


class ProcessExecutionError(FileExplorerError):
    """Raised when the file manager process exited unsuccessfully."""

    def __init__(self, message: str, returncode: int, details: Optional[str] = None):
        super().__init__(message, details)
        self.returncode = returncode


__all__ = [
    "FileExplorerError",
    "PathAccessError",
    "UnsupportedPlatformError",
    "StrategyResolutionError",
    "ProcessStartError",
    "ProcessExecutionError",
]
