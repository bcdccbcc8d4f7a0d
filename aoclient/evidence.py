"""The evidence locker: the global and private evidence lists and their editing."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Callable, Iterable, Optional, Union

from aoclient.inventory import (
    DEFAULT_DESCRIPTION,
    DEFAULT_IMAGE,
    DEFAULT_NAME,
    EvidenceItem,
    load_inventory,
    save_inventory,
)
from aoclient.paging import PageLayout, page_layout

log = logging.getLogger(__name__)

PacketSender = Callable[[str, list], None]


class EvidenceLocker:
    """Evidence shown to the player, switching between global and private lists.

    Changes to global evidence are sent to the server through ``send_packet``
    as ``(header, contents)``; changes to private evidence are kept locally and
    written to ``autosave_path`` when one is given.
    """

    def __init__(
        self,
        send_packet: PacketSender,
        per_page: int = 18,
        autosave_path: Optional[Union[str, PathLike]] = None,
    ) -> None:
        if per_page <= 0:
            raise ValueError("per_page must be positive")
        self._send = send_packet
        self.per_page = per_page
        self.autosave_path = autosave_path
        self.global_list: list[EvidenceItem] = []
        self.private_list: list[EvidenceItem] = []
        self.local_list: list[EvidenceItem] = []
        self.is_global = True
        self.current_evidence = 0
        self.current_page = 0
        self.presenting = False
        if autosave_path is not None:
            try:
                self.private_list = load_inventory(autosave_path)
            except FileNotFoundError:
                pass

    def _autosave(self) -> None:
        if self.autosave_path is not None:
            save_inventory(self.autosave_path, self.private_list)

    def _sync_private(self) -> None:
        self.private_list = list(self.local_list)

    def set_global_list(self, items: Iterable[EvidenceItem]) -> None:
        """Take the evidence list sent by the server."""
        self.global_list = list(items)
        if not self.is_global:
            # The player is working in the private inventory; leave it alone.
            return
        self.local_list = list(self.global_list)

    def switch(self, use_global: bool) -> None:
        """Show the global list (True) or the private one (False)."""
        self.is_global = use_global
        self.presenting = False
        source = self.global_list if use_global else self.private_list
        self.local_list = list(source)
        self.current_page = 0

    def click(self, button_id: int) -> Optional[EvidenceItem]:
        """Act on button ``button_id`` of the shown page.

        The button after the last item adds new evidence. A button holding
        evidence selects it, and the selected item is returned.
        """
        real_id = button_id + self.per_page * self.current_page
        if real_id == len(self.local_list):
            if self.is_global:
                self._send("PE", [DEFAULT_NAME, DEFAULT_DESCRIPTION, DEFAULT_IMAGE])
            else:
                self.local_list.append(
                    EvidenceItem(name=DEFAULT_NAME, description=DEFAULT_DESCRIPTION, image=DEFAULT_IMAGE)
                )
                self._sync_private()
            return None
        if real_id > len(self.local_list) or real_id < 0:
            return None
        self.current_evidence = real_id
        return self.local_list[real_id]

    def delete(self) -> None:
        """Delete the selected evidence."""
        if self.is_global:
            self._send("DE", [str(self.current_evidence)])
        else:
            if not 0 <= self.current_evidence < len(self.local_list):
                raise IndexError(f"no evidence at index {self.current_evidence}")
            del self.local_list[self.current_evidence]
            self._sync_private()
            self._autosave()
        self.current_evidence = 0

    def commit(self, name: str, description: str, image: str) -> None:
        """Save edits to the selected evidence."""
        if self.current_evidence < len(self.local_list):
            if self.is_global:
                self._send("EE", [str(self.current_evidence), name, description, image])
            else:
                self.local_list[self.current_evidence] = EvidenceItem(
                    name=name, description=description, image=image
                )
                self._sync_private()
        if not self.is_global:
            self._autosave()

    def transfer(self) -> Optional[str]:
        """Copy the selected evidence to the other list; return its name."""
        if self.current_evidence >= len(self.local_list):
            return None
        item = self.local_list[self.current_evidence]
        if not self.is_global:
            self._send("PE", [item.name, item.description, item.image])
        else:
            self.private_list.append(EvidenceItem(item.name, item.description, item.image))
            self._autosave()
        return item.name

    def toggle_present(self) -> bool:
        """Toggle presenting on the next message; private evidence cannot be presented."""
        if not self.is_global:
            self.presenting = False
            return False
        self.presenting = not self.presenting
        return self.presenting

    def layout(self) -> PageLayout:
        """Return the shown page's layout, counting the "add evidence" button."""
        return page_layout(len(self.local_list) + 1, self.per_page, self.current_page)