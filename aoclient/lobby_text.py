"""Text shown in the lobby: server descriptions, player counts and versions."""

from __future__ import annotations

import re
from typing import Iterable, Union

from aoclient.serverinfo import ServerInfo

_LINKS = re.compile(r"\b(https?://\S+\.\S+)\b")
_VERSION = re.compile(r"\d+(?:\.\d+)*")

Version = tuple


def _html_escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def format_server_description(text: str) -> str:
    """Return a server description as HTML, with line breaks and clickable links."""
    html = _html_escape(text).replace("\n", "<br>")
    return _LINKS.sub(r"<a href='\1'>\1</a>", html)


def player_count_text(players_online: int, max_players: int) -> str:
    """Return the lobby's player count label."""
    return f"Online: {players_online}/{max_players}"


def parse_version(text: str) -> tuple[int, ...]:
    """Parse the leading dotted numbers of ``text``; () if there are none."""
    match = _VERSION.match(text.strip())
    if not match:
        return ()
    return tuple(int(part) for part in match.group(0).split("."))


def is_outdated(current: Union[str, tuple], master: Union[str, tuple]) -> bool:
    """Return True if ``current`` is an older version than ``master``."""
    if isinstance(current, str):
        current = parse_version(current)
    if isinstance(master, str):
        master = parse_version(master)
    return tuple(current) < tuple(master)


def _display_name(server: ServerInfo) -> str:
    return "(Legacy) " + server.name if server.legacy else server.name


def filter_servers(servers: Iterable[ServerInfo], text: str) -> list[int]:
    """Return the rows of the servers whose listed name contains ``text``, ignoring case."""
    servers = list(servers)
    if not text:
        return list(range(len(servers)))
    needle = text.casefold()
    return [row for row, server in enumerate(servers) if needle in _display_name(server).casefold()]