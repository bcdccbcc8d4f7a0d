"""Selection state of the emote picker."""

from __future__ import annotations

from typing import Optional

from aoclient.paging import PageLayout, page_layout


class EmoteSelector:
    """Tracks the selected emote, the shown page and the preanimation toggle."""

    def __init__(self, per_page: int = 10) -> None:
        if per_page <= 0:
            raise ValueError("per_page must be positive")
        self.per_page = per_page
        self.current_emote = 0
        self.current_page = 0
        self.pre_checked = False

    @property
    def selected_button(self) -> Optional[int]:
        """The button on the shown page holding the selected emote, if any."""
        first = self.current_page * self.per_page
        if first <= self.current_emote < first + self.per_page:
            return self.current_emote % self.per_page
        return None

    def select(self, emote_id: int, is_preanim: bool, clear_pre_on_play: bool) -> bool:
        """Select ``emote_id`` and return whether the preanimation box is now ticked.

        Choosing the already selected emote toggles the box. Otherwise, unless
        the box is cleared on play, it follows whether the emote has a preanimation.
        """
        old_emote = self.current_emote
        self.current_emote = emote_id
        if old_emote == emote_id:
            self.pre_checked = not self.pre_checked
        elif not clear_pre_on_play:
            self.pre_checked = bool(is_preanim)
        return self.pre_checked

    def click(self, button_id: int, is_preanim: bool, clear_pre_on_play: bool) -> bool:
        """Select the emote under button ``button_id`` of the shown page."""
        return self.select(button_id + self.per_page * self.current_page, is_preanim, clear_pre_on_play)

    def next_page(self) -> None:
        self.current_page += 1

    def previous_page(self) -> None:
        if self.current_page == 0:
            raise IndexError("already on the first page")
        self.current_page -= 1

    def layout(self, total_emotes: int) -> PageLayout:
        """Return the layout of the shown page for a character with ``total_emotes``."""
        return page_layout(total_emotes, self.per_page, self.current_page)