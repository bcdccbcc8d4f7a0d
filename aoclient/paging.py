"""Paged grids of buttons, as used by the emote and evidence pickers."""

from __future__ import annotations

from dataclasses import dataclass


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True)
class PageLayout:
    """What one page of a paged list shows."""

    total_pages: int
    items_on_page: int
    first_index: int
    show_left: bool
    show_right: bool

    @property
    def indices(self) -> range:
        """The indices into the full list of the items on this page."""
        return range(self.first_index, self.first_index + self.items_on_page)


def page_layout(total: int, per_page: int, current_page: int) -> PageLayout:
    """Work out how many items page ``current_page`` holds and which arrows show."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")

    total_pages, remainder = divmod(total, per_page)
    if remainder:
        total_pages += 1
        on_last_page = total_pages <= current_page + 1
        items_on_page = remainder if on_last_page else per_page
    else:
        items_on_page = per_page

    return PageLayout(
        total_pages=total_pages,
        items_on_page=items_on_page,
        first_index=current_page * per_page,
        show_left=current_page > 0,
        show_right=total_pages > current_page + 1,
    )


def grid_size(
    area_width: int,
    area_height: int,
    button_width: int,
    button_height: int,
    x_spacing: int,
    y_spacing: int,
) -> tuple[int, int]:
    """Return ``(columns, rows)`` of buttons that fit in the given area."""
    columns = _trunc_div(area_width - button_width, max(1, x_spacing + button_width)) + 1
    rows = _trunc_div(area_height - button_height, max(1, y_spacing + button_height)) + 1
    return columns, rows


def button_positions(
    count: int,
    columns: int,
    button_width: int,
    button_height: int,
    x_spacing: int,
    y_spacing: int,
) -> list[tuple[int, int]]:
    """Return the top-left corner of each of ``count`` buttons, filled row by row."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    return [
        ((button_width + x_spacing) * column, (button_height + y_spacing) * row)
        for row, column in (divmod(index, columns) for index in range(count))
    ]