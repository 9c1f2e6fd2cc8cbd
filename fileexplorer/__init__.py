"""Open the native file manager at a path, optionally selecting the file."""
from .errors import (
    FileExplorerError,
    PathAccessError,
    ProcessExecutionError,
    ProcessStartError,
    StrategyResolutionError,
    UnsupportedPlatformError,
)
from .launch import classify_path, open_path, run_launch_spec
from .models import LaunchSpec, Strategy
from .strategies import resolve_launch_spec

__all__ = [
    "FileExplorerError",
    "PathAccessError",
    "ProcessExecutionError",
    "ProcessStartError",
    "StrategyResolutionError",
    "UnsupportedPlatformError",
    "LaunchSpec",
    "Strategy",
    "classify_path",
    "open_path",
    "resolve_launch_spec",
    "run_launch_spec",
]
