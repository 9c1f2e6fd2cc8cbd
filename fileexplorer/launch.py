"""Reveal a path in the native file manager and wait for the launch."""
from __future__ import annotations

import logging
import os
import stat
import subprocess
import sys
from typing import List, Mapping, Optional, Union

from .errors import PathAccessError, ProcessExecutionError, ProcessStartError
from .models import LaunchSpec, Strategy
from .strategies import FAMILY_LINUX, current_desktop, platform_family, resolve_launch_spec

_LOGGER = logging.getLogger(__name__)


def classify_path(path: str) -> bool:
    """Return ``True`` when ``path`` is a directory.

    Raises :class:`PathAccessError` when the path cannot be stat'd.
    """

    try:
        info = os.stat(path)
    except (OSError, ValueError) as exc:
        raise PathAccessError("failed to access the specified path", details=str(exc)) from exc
    return stat.S_ISDIR(info.st_mode)


def _windows_command_line(spec: LaunchSpec) -> str:
    # explorer parses its own command line; pre-quoted tokens must survive as-is
    parts = [spec.executable]
    for arg in spec.args:
        parts.append(arg if '"' in arg else subprocess.list2cmdline([arg]))
    return " ".join(parts)


def _build_command(spec: LaunchSpec) -> Union[str, List[str]]:
    if spec.strategy is Strategy.WINDOWS:
        return _windows_command_line(spec)
    return spec.command()


def run_launch_spec(spec: LaunchSpec) -> None:
    """Start the file manager described by ``spec`` and block until it exits."""

    cmd = _build_command(spec)
    _LOGGER.info("Launching file manager: %s", cmd)
    try:
        proc = subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        raise ProcessStartError(
            f"failed to start the file explorer process '{spec.executable}'", details=str(exc)
        ) from exc

    returncode = proc.wait()
    if returncode == 0:
        return
    if spec.ignore_exit_code:
        _LOGGER.info("Ignoring exit code %s from %s", returncode, spec.executable)
        return
    raise ProcessExecutionError(
        f"file explorer process '{spec.executable}' failed",
        returncode=returncode,
        details=f"exit status {returncode}",
    )


def open_path(
    path: str,
    select_file: bool = False,
    *,
    platform_id: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Open the file manager at ``path``, selecting it when it is a file.

    ``select_file`` is ignored for directories. ``platform_id`` defaults to
    ``sys.platform`` and ``environ`` to ``os.environ``; the desktop environment
    is read from it only on Linux.
    """

    path = os.fspath(path)
    if classify_path(path):
        select_file = False

    platform_id = sys.platform if platform_id is None else platform_id
    desktop_env = None
    if platform_family(platform_id) == FAMILY_LINUX:
        desktop_env = current_desktop(environ)

    spec = resolve_launch_spec(path, select_file, platform_id, desktop_env)
    run_launch_spec(spec)


__all__ = ["classify_path", "open_path", "run_launch_spec"]
