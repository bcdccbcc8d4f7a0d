"""INI-backed key/value settings, compatible with the Qt INI settings layout.

Keys use ``/`` to name a group: ``"visuals/playerlist_format"`` lives in the
``[visuals]`` section. Keys without a group live in ``[General]``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

_GENERAL = "General"
_INVALID = "@Invalid()"
_POINT = re.compile(r"^@Point\(\s*(-?\d+)\s+(-?\d+)\s*\)$")
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\", '"': '"'}


def _encode_text(text: str) -> str:
    escaped = "".join(_ESCAPES.get(char, char) for char in text)
    needs_quotes = (
        any(char in ',;="\\\n\r\t' for char in text)
        or text != text.strip()
        or text.startswith("@")
    )
    return f'"{escaped}"' if needs_quotes else escaped


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, int) for v in value):
        return f"@Point({value[0]} {value[1]})"
    if isinstance(value, (list, tuple)):
        if not value:
            return _INVALID
        return ", ".join(_encode_text(str(item)) for item in value)
    return _encode_text("" if value is None else str(value))


def _split(raw: str) -> list[str]:
    """Split a stored value into its items, undoing quoting and escapes."""
    items: list[str] = []
    buffer: list[str] = []
    quoted = False
    in_quotes = False
    chars = iter(raw)
    for char in chars:
        if char == "\\":
            following = next(chars, "")
            buffer.append(_UNESCAPES.get(following, following))
        elif char == '"':
            in_quotes = not in_quotes
            quoted = True
        elif char == "," and not in_quotes:
            items.append(_finish(buffer, quoted))
            buffer, quoted = [], False
        else:
            buffer.append(char)
    items.append(_finish(buffer, quoted))
    return items


def _finish(buffer: list[str], quoted: bool) -> str:
    text = "".join(buffer)
    return text if quoted else text.strip()


def _to_bool(text: str) -> bool:
    return text.strip().lower() not in ("", "false", "0")


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _split_key(key: str) -> tuple[str, str]:
    key = key.strip("/")
    if "/" in key:
        section, name = key.split("/", 1)
        return section, name
    return _GENERAL, key


class _SettingsGroup:
    """A view of the settings with every key prefixed by a group name."""

    def __init__(self, settings: "IniSettings", prefix: str) -> None:
        self._settings = settings
        self._prefix = prefix.strip("/") + "/"

    def __enter__(self) -> "_SettingsGroup":
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def value(self, key: str, default: Any = None) -> Any:
        return self._settings.value(self._prefix + key, default)

    def set_value(self, key: str, value: Any) -> None:
        self._settings.set_value(self._prefix + key, value)

    def contains(self, key: str) -> bool:
        return self._settings.contains(self._prefix + key)

    def remove(self, key: str) -> None:
        self._settings.remove(self._prefix + key)

    def group(self, name: str) -> "_SettingsGroup":
        return _SettingsGroup(self._settings, self._prefix + name)


class IniSettings:
    """Settings stored in an INI file; every change is written out at once."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        self._sections: dict[str, dict[str, str]] = {}
        if self.path.is_file():
            self._load(self.path.read_text(encoding="utf-8", errors="replace"))

    def _load(self, text: str) -> None:
        section = _GENERAL
        for line in text.splitlines():
            stripped = line.strip()
            if not stripped or stripped[0] in ";#":
                continue
            if stripped.startswith("[") and stripped.endswith("]"):
                section = stripped[1:-1].strip()
                if section == "%General":
                    section = _GENERAL
                self._sections.setdefault(section, {})
            elif "=" in stripped:
                key, raw = stripped.split("=", 1)
                name = key.strip().replace("\\", "/")
                self._sections.setdefault(section, {})[name] = raw.strip()

    def _raw(self, key: str) -> str | None:
        section, name = _split_key(key)
        return self._sections.get(section, {}).get(name)

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key`` converted to the type of ``default``."""
        raw = self._raw(key)
        if raw is None or raw == _INVALID:
            return list(default) if isinstance(default, list) else default
        if isinstance(default, bool):
            return _to_bool(", ".join(_split(raw)))
        if isinstance(default, int):
            return _to_int(", ".join(_split(raw)))
        if isinstance(default, tuple):
            match = _POINT.match(raw)
            return (int(match.group(1)), int(match.group(2))) if match else (0, 0)
        items = _split(raw)
        if isinstance(default, list):
            return items
        if isinstance(default, str) or len(items) == 1:
            return ", ".join(items)
        return items

    def set_value(self, key: str, value: Any) -> None:
        section, name = _split_key(key)
        self._sections.setdefault(section, {})[name] = _encode(value)
        self.sync()

    def contains(self, key: str) -> bool:
        return self._raw(key) is not None

    def remove(self, key: str) -> None:
        """Remove ``key`` and every key below it."""
        section, name = _split_key(key)
        if section == _GENERAL:
            self._sections.get(_GENERAL, {}).pop(name, None)
            self._sections.pop(name, None)
        else:
            entries = self._sections.get(section, {})
            for existing in [k for k in entries if k == name or k.startswith(name + "/")]:
                del entries[existing]
        self.sync()

    def child_groups(self) -> list[str]:
        """Return the names of the top-level groups, sorted as text."""
        return sorted(name for name, entries in self._sections.items() if name != _GENERAL and entries)

    def group(self, name: str) -> _SettingsGroup:
        return _SettingsGroup(self, name)

    def clear(self) -> None:
        self._sections.clear()
        self.sync()

    def sync(self) -> None:
        """Write the settings to their file."""
        names = [_GENERAL] if self._sections.get(_GENERAL) else []
        names += sorted(name for name in self._sections if name != _GENERAL)
        lines: list[str] = []
        for name in names:
            entries = self._sections[name]
            if not entries:
                continue
            lines.append(f"[{name}]")
            for key, raw in entries.items():
                stored_key = key.replace("/", "\\")
                lines.append(f"{stored_key}={raw}")
            lines.append("")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(lines), encoding="utf-8")