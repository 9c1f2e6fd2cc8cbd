"""Map platform and desktop environment to a file manager command."""
from __future__ import annotations

import os
import posixpath
from typing import Dict, Mapping, Optional

from .errors import StrategyResolutionError, UnsupportedPlatformError
from .models import LaunchSpec, Strategy

DESKTOP_ENV_VAR = "XDG_CURRENT_DESKTOP"

FAMILY_WINDOWS = "windows"
FAMILY_MACOS = "macos"
FAMILY_LINUX = "linux"

DESKTOP_STRATEGIES: Dict[str, Strategy] = {
    "CINNAMON": Strategy.CINNAMON,
    "X-CINNAMON": Strategy.CINNAMON,
    "GNOME": Strategy.GNOME,
    "GNOME-FLASHBACK": Strategy.GNOME,
    "GNOME-FLASHBACK:GNOME": Strategy.GNOME,
    "KDE": Strategy.KDE,
    "LXQT": Strategy.LXQT,
    "MATE": Strategy.MATE,
    "XFCE": Strategy.XFCE,
}

# Desktop file managers that select a file when given its path.
DESKTOP_EXECUTABLES: Dict[Strategy, str] = {
    Strategy.CINNAMON: "nemo",
    Strategy.GNOME: "nautilus",
    Strategy.KDE: "dolphin",
    Strategy.LXQT: "pcmanfm-qt",
    Strategy.MATE: "caja",
    Strategy.XFCE: "thunar",
}


def platform_family(platform_id: str) -> str:
    """Return the strategy family for a ``sys.platform`` value."""

    if platform_id.startswith("win"):
        return FAMILY_WINDOWS
    if platform_id == "darwin":
        return FAMILY_MACOS
    if platform_id.startswith("linux"):
        return FAMILY_LINUX
    raise UnsupportedPlatformError("unsupported platform", details=platform_id)


def current_desktop(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return env.get(DESKTOP_ENV_VAR, "")


def normalize_desktop(desktop_env: Optional[str]) -> str:
    return (desktop_env or "").strip().upper()


def linux_strategy(desktop_env: Optional[str]) -> Strategy:
    return DESKTOP_STRATEGIES.get(normalize_desktop(desktop_env), Strategy.LINUX_FALLBACK)


def select_strategy(platform_id: str, desktop_env: Optional[str] = None) -> Strategy:
    family = platform_family(platform_id)
    if family == FAMILY_WINDOWS:
        return Strategy.WINDOWS
    if family == FAMILY_MACOS:
        return Strategy.MACOS
    return linux_strategy(desktop_env)


def _parent_dir(path: str) -> str:
    """Everything up to the last slash, cleaned; a trailing slash keeps the folder."""

    head = path[: path.rfind("/") + 1]
    if not head:
        return "."
    cleaned = posixpath.normpath(head)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def resolve_launch_spec(
    path: str,
    select_file: bool,
    platform_id: str,
    desktop_env: Optional[str] = None,
) -> LaunchSpec:
    """Build the file manager command for ``path``.

    ``desktop_env`` is only consulted on Linux. Raises
    :class:`UnsupportedPlatformError` for platforms without a strategy.
    """

    strategy = select_strategy(platform_id, desktop_env)

    if strategy is Strategy.WINDOWS:
        arg = f'/select,"{path}"' if select_file else path
        # explorer.exe reports a non-zero exit code even on success
        # (https://github.com/microsoft/WSL/issues/6565)
        return LaunchSpec(strategy=strategy, executable="explorer", args=[arg], ignore_exit_code=True)

    if strategy is Strategy.MACOS:
        args = ["-R", path] if select_file else [path]
        return LaunchSpec(strategy=strategy, executable="open", args=args)

    if strategy is Strategy.LINUX_FALLBACK:
        # xdg-open cannot select files, only open the containing folder
        return LaunchSpec(strategy=strategy, executable="xdg-open", args=[_parent_dir(path)])

    executable = DESKTOP_EXECUTABLES.get(strategy)
    if executable is None:
        raise StrategyResolutionError("no file manager known for strategy", details=strategy.value)
    target = path if select_file else _parent_dir(path)
    return LaunchSpec(strategy=strategy, executable=executable, args=[target])


__all__ = [
    "DESKTOP_ENV_VAR",
    "FAMILY_WINDOWS",
    "FAMILY_MACOS",
    "FAMILY_LINUX",
    "platform_family",
    "current_desktop",
    "normalize_desktop",
    "select_strategy",
    "resolve_launch_spec",
]
