"""Data models for launch specs and persisted front-end settings."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

APP_TITLE = "Show in File Manager"
SETTINGS_FILE = "settings.json"
MAX_RECENT = 15


class Strategy(str, Enum):
    """File manager integration chosen for a platform/desktop pair."""

    WINDOWS = "windows"
    MACOS = "macos"
    CINNAMON = "cinnamon"
    GNOME = "gnome"
    KDE = "kde"
    LXQT = "lxqt"
    MATE = "mate"
    XFCE = "xfce"
    LINUX_FALLBACK = "linux-fallback"


class LaunchSpec(BaseModel):
    """Executable and arguments for one file manager launch."""

    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    executable: str
    args: List[str] = Field(default_factory=list)
    ignore_exit_code: bool = False

    def command(self) -> List[str]:
        return [self.executable, *self.args]


class AppSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    select_file: bool = True
    recent: List[str] = Field(default_factory=list)


class SettingsStore:
    """Persist and mutate front-end preferences."""

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir
        self.settings_path = base_dir / SETTINGS_FILE
        self.settings = self._load()

    # ----- Persistence -------------------------------------------------
    def _load(self) -> AppSettings:
        if self.settings_path.exists():
            try:
                data = self.settings_path.read_text(encoding="utf-8")
                return AppSettings.model_validate_json(data)
            except (OSError, ValidationError):
                pass
        return AppSettings()

    def save(self) -> None:
        payload = self.settings.model_dump_json(indent=2)
        self.settings_path.write_text(payload, encoding="utf-8")

    # ----- Preferences -------------------------------------------------
    @property
    def recent(self) -> List[str]:
        return self.settings.recent

    def set_select_file(self, value: bool) -> None:
        if self.settings.select_file == value:
            return
        self.settings.select_file = value
        self.save()

    def remember(self, path: str) -> None:
        recent = [entry for entry in self.settings.recent if entry != path]
        recent.insert(0, path)
        self.settings.recent = recent[:MAX_RECENT]
        self.save()

    def forget(self, path: str) -> bool:
        if path not in self.settings.recent:
            return False
        self.settings.recent = [entry for entry in self.settings.recent if entry != path]
        self.save()
        return True


__all__ = [
    "APP_TITLE",
    "MAX_RECENT",
    "Strategy",
    "LaunchSpec",
    "AppSettings",
    "SettingsStore",
]
