"""Immutable picker state and its derived views."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property

from termpick.filtering import matching_indices
from termpick.keys import Mode
from termpick.models import Item
from termpick.navigation import auto_columns
from termpick.pagination import clamp_page, page_indices, page_of, total_pages
from termpick.selection import SelectionSet

DEFAULT_WIDTH = 80


@dataclass(frozen=True)
class PickerState:
    """Everything one frame of a picker needs.

    Only the fields are stored; filtered indices, the current page slice and
    the grid column count are derived from them on first access.
    """

    items: tuple[Item, ...]
    mode: Mode = Mode.NORMAL
    filter_text: str = ""
    cursor: int | None = 0
    page: int = 0
    selection: SelectionSet = field(default_factory=SelectionSet)
    page_size: int | None = None
    # 1 for lists, None for an automatic grid layout
    columns: int | None = 1
    border: bool = False
    # Grid cell width taken by selection markers
    cell_extra: int = 0
    width: int = DEFAULT_WIDTH

    @cached_property
    def filtered(self) -> tuple[int, ...]:
        return matching_indices(self.items, self.filter_text)

    @cached_property
    def page_indices(self) -> tuple[int, ...]:
        return page_indices(self.filtered, self.page_size, self.page)

    @cached_property
    def total_pages(self) -> int:
        return total_pages(self.filtered, self.page_size)

    @cached_property
    def grid_columns(self) -> int:
        if self.columns is not None:
            return self.columns
        labels = [self.items[i].label for i in self.page_indices]
        return auto_columns(labels, self.width, self.border, self.cell_extra)

    @property
    def done(self) -> bool:
        return self.mode.done

    @property
    def current_item(self) -> Item | None:
        return None if self.cursor is None else self.items[self.cursor]

    def with_filter(self, text: str) -> PickerState:
        """Replace the filter text and re-clamp cursor and page."""
        return replace(self, filter_text=text).reclamped()

    def reclamped(self) -> PickerState:
        """Move the cursor to the nearest filtered entry and its page.

        Nearest is the first match at or after the old cursor, else the last
        match. With no matches the cursor is None.
        """
        filtered = self.filtered
        if not filtered:
            return replace(self, cursor=None, page=0)
        if self.cursor in filtered:
            position = filtered.index(self.cursor)
        elif self.cursor is None:
            position = 0
        else:
            position = next(
                (pos for pos, index in enumerate(filtered) if index >= self.cursor),
                len(filtered) - 1,
            )
        page = clamp_page(page_of(position, self.page_size), filtered, self.page_size)
        return replace(self, cursor=filtered[position], page=page)
