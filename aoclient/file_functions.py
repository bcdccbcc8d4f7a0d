"""Filesystem helpers: existence checks and the application's base paths."""

from __future__ import annotations

import os
import sys


def file_exists(file_path: str) -> bool:
    """Return True if ``file_path`` names an existing regular file."""
    if not file_path:
        return False
    return os.path.isfile(file_path)


def dir_exists(dir_path: str) -> bool:
    """Return True if ``dir_path`` names an existing directory."""
    if not dir_path:
        return False
    return os.path.isdir(dir_path)


def exists(path: str) -> bool:
    """Return True if anything exists at ``path``."""
    if not path:
        return False
    return os.path.exists(path)


def get_app_path() -> str:
    """Return the directory the application runs from, without a trailing separator."""
    frozen = bool(getattr(sys, "frozen", False))
    if frozen:
        path = os.path.dirname(os.path.abspath(sys.executable))
    elif sys.argv and sys.argv[0]:
        path = os.path.dirname(os.path.abspath(sys.argv[0]))
    else:
        path = os.getcwd()

    if sys.platform.startswith("linux"):
        appimage = os.environ.get("APPIMAGE", "")
        if appimage:
            path = os.path.dirname(os.path.abspath(appimage))

    if sys.platform == "darwin" and frozen:
        # The executable sits inside Name.app/Contents/MacOS.
        path = os.path.normpath(os.path.join(path, "..", "..", ".."))

    if len(path) > 1 and path.endswith(os.sep):
        path = path[:-1]
    return path


def get_base_path() -> str:
    """Return the absolute path of the ``base`` directory, ending in a slash."""
    return os.path.join(os.path.abspath(get_app_path()), "base") + "/"