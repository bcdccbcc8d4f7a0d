"""Description of a game server as listed by the master server or favourites."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ServerInfo:
    """A server entry: display data plus where to connect."""

    name: str = ""
    description: str = ""
    address: str = ""
    port: int = 0
    legacy: bool = False

    def __str__(self) -> str:
        name = self.name or "Unnamed Server"
        return f"{name} ({self.address}:{self.port})"