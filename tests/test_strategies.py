from __future__ import annotations

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from fileexplorer import strategies
from fileexplorer.errors import UnsupportedPlatformError
from fileexplorer.models import Strategy


def test_gnome_lowercase_with_whitespace_opens_parent():
    spec = strategies.resolve_launch_spec("/home/user/doc.txt", False, "linux", "  gnome  ")
    assert spec.strategy is Strategy.GNOME
    assert spec.executable == "nautilus"
    assert spec.args == ["/home/user"]
    assert spec.ignore_exit_code is False


@pytest.mark.parametrize(
    "desktop, executable",
    [
        ("CINNAMON", "nemo"),
        ("X-Cinnamon", "nemo"),
        ("GNOME-Flashback", "nautilus"),
        ("GNOME-Flashback:GNOME", "nautilus"),
        ("KDE", "dolphin"),
        ("LXQt", "pcmanfm-qt"),
        ("MATE", "caja"),
        ("XFCE", "thunar"),
    ],
)
def test_desktop_file_managers_select_given_path(desktop, executable):
    spec = strategies.resolve_launch_spec("/srv/data/report.pdf", True, "linux", desktop)
    assert spec.executable == executable
    assert spec.args == ["/srv/data/report.pdf"]


@pytest.mark.parametrize("desktop", [None, "", "Unity", "ubuntu:GNOME"])
def test_linux_fallback_drops_selection(desktop):
    spec = strategies.resolve_launch_spec("/home/user/doc.txt", True, "linux", desktop)
    assert spec.strategy is Strategy.LINUX_FALLBACK
    assert spec.executable == "xdg-open"
    assert spec.args == ["/home/user"]


def test_parent_of_bare_file_name_is_current_dir():
    spec = strategies.resolve_launch_spec("doc.txt", False, "linux", "KDE")
    assert spec.args == ["."]


def test_macos_reveal_uses_flag():
    spec = strategies.resolve_launch_spec("/Users/a/file.txt", True, "darwin")
    assert spec.executable == "open"
    assert spec.command() == ["open", "-R", "/Users/a/file.txt"]


def test_macos_plain_open_passes_path():
    spec = strategies.resolve_launch_spec("/Users/a", False, "darwin")
    assert spec.args == ["/Users/a"]
    assert spec.ignore_exit_code is False


def test_windows_select_token_shape():
    spec = strategies.resolve_launch_spec(r"C:\Users\a\My File.txt", True, "win32")
    assert spec.executable == "explorer"
    assert spec.args == ['/select,"C:\\Users\\a\\My File.txt"']
    assert spec.ignore_exit_code is True


def test_windows_plain_open_passes_bare_path():
    spec = strategies.resolve_launch_spec(r"C:\Users\a", False, "win32")
    assert spec.args == [r"C:\Users\a"]


def test_desktop_is_ignored_outside_linux():
    spec = strategies.resolve_launch_spec("/Users/a/file.txt", False, "darwin", "KDE")
    assert spec.strategy is Strategy.MACOS


@pytest.mark.parametrize("platform_id", ["freebsd13", "aix", "emscripten", ""])
def test_unsupported_platform(platform_id):
    with pytest.raises(UnsupportedPlatformError):
        strategies.resolve_launch_spec("/tmp/x", False, platform_id)


def test_current_desktop_reads_given_environment():
    assert strategies.current_desktop({"XDG_CURRENT_DESKTOP": "KDE"}) == "KDE"
    assert strategies.current_desktop({}) == ""


def test_current_desktop_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "MATE")
    assert strategies.current_desktop() == "MATE"


@pytest.mark.parametrize(
    "path, parent",
    [
        ("/home/user/", "/home/user"),
        ("/home/user//", "/home/user"),
        ("/", "/"),
        ("//srv/x", "/srv"),
        ("/a/./b/../c.txt", "/a"),
    ],
)
def test_parent_dir_keeps_folder_named_with_trailing_slash(path, parent):
    spec = strategies.resolve_launch_spec(path, False, "linux", "KDE")
    assert spec.args == [parent]


def test_fallback_opens_folder_named_with_trailing_slash():
    spec = strategies.resolve_launch_spec("/home/user/", True, "linux", "")
    assert spec.args == ["/home/user"]
