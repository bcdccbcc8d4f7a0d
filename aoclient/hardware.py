"""Best-effort identifier of the machine or user, sent to servers as the HDID."""

from __future__ import annotations

import csv
import io
import re
import subprocess
import sys

_WINDOWS_QUERY_FAILED = "gxsps32sa9fnwic92mfbs1"
_WINDOWS_PARSE_FAILED = "gxsps32sa9fnwic92mfbs2"

_MACHINE_ID_PATHS: tuple[str, ...] = ("/etc/machine-id", "/var/lib/dbus/machine-id")

_UUID_LINE = re.compile(r'"IOPlatformUUID"\s*=\s*"([^"]+)"')


def _run(command: list[str]) -> str:
    result = subprocess.run(command, capture_output=True, text=True, check=True, timeout=10)
    return result.stdout


def _read_machine_id(paths) -> str:
    """Return the first non-empty machine id found in ``paths``, or ''."""
    for path in paths:
        try:
            with open(path, encoding="ascii", errors="ignore") as handle:
                content = handle.read().strip()
        except OSError:
            continue
        if content:
            return content
    return ""


def _windows_user_sid() -> str:
    try:
        output = _run(["whoami", "/user", "/fo", "csv", "/nh"])
    except (OSError, subprocess.SubprocessError):
        return _WINDOWS_QUERY_FAILED
    for row in csv.reader(io.StringIO(output)):
        if len(row) >= 2 and row[-1].strip().startswith("S-"):
            return row[-1].strip()
    return _WINDOWS_PARSE_FAILED


def _mac_platform_uuid() -> str:
    try:
        output = _run(["ioreg", "-rd1", "-c", "IOPlatformExpertDevice"])
    except (OSError, subprocess.SubprocessError):
        return ""
    match = _UUID_LINE.search(output)
    return match.group(1) if match else ""


def get_hdid() -> str:
    """Return the hardware/user identifier for this machine ('' if unknown)."""
    if sys.platform.startswith("win"):
        return _windows_user_sid()
    if sys.platform == "darwin":
        return _mac_platform_uuid()
    return _read_machine_id(_MACHINE_ID_PATHS)