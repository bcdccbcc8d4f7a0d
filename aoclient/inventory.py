"""Private evidence inventories, stored as INI files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

from aoclient.settings import IniSettings

log = logging.getLogger(__name__)

DEFAULT_NAME = "<name>"
DEFAULT_DESCRIPTION = "<description>"
DEFAULT_IMAGE = "empty.png"

_GENERAL = "General"


@dataclass
class EvidenceItem:
    """One piece of evidence."""

    name: str = ""
    description: str = ""
    image: str = ""


def evidence_changed(a: EvidenceItem, b: EvidenceItem) -> bool:
    """Return True if the two pieces of evidence differ in name, image or description."""
    return a.name != b.name or a.image != b.image or a.description != b.description


def load_inventory(path: Union[str, PathLike]) -> list[EvidenceItem]:
    """Read the evidence stored in the inventory file at ``path``.

    Raises FileNotFoundError if there is no such file.
    """
    file_path = Path(path)
    if not file_path.is_file():
        log.warning("Trying to load a non-existent evidence save file: %s", file_path)
        raise FileNotFoundError(f"no inventory file at {file_path}")

    inventory = IniSettings(file_path)
    items: list[EvidenceItem] = []
    for group_name in inventory.child_groups():
        if group_name == _GENERAL:
            continue
        group = inventory.group(group_name)
        items.append(
            EvidenceItem(
                name=group.value("name", DEFAULT_NAME),
                description=group.value("description", DEFAULT_DESCRIPTION),
                image=group.value("image", DEFAULT_IMAGE),
            )
        )
    return items


def save_inventory(path: Union[str, PathLike], items: Iterable[EvidenceItem]) -> None:
    """Replace the contents of the inventory file at ``path`` with ``items``."""
    inventory = IniSettings(path)
    inventory.clear()
    for index, item in enumerate(items):
        group = inventory.group(str(index))
        group.set_value("name", item.name)
        group.set_value("description", item.description)
        group.set_value("image", item.image)
    inventory.sync()