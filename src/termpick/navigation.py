"""Cursor movement over filtered indices.

Two topologies share the paging rules: `LineNavigation` moves through a
single column and wraps across pages, `GridNavigation` lays the current page
out row-major and moves in two dimensions.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

from rich.cells import cell_len

from termpick.keys import Action
from termpick.pagination import page_indices, page_of, total_pages

if TYPE_CHECKING:
    from termpick.state import PickerState

# Brackets (or padding) around the focused label in a grid cell
CURSOR_OVERHEAD = 2
MIN_CELL_WIDTH = 4


def cell_width_for(
    labels: Sequence[str], extra: int = 0, display_width: Callable[[str], int] = cell_len
) -> int:
    """Cell width that fits the widest label plus cursor brackets and `extra`."""
    widest = max((display_width(label) for label in labels), default=0)
    return max(widest + CURSOR_OVERHEAD + extra, MIN_CELL_WIDTH)


def auto_columns(
    labels: Sequence[str],
    width: int,
    border: bool = False,
    extra: int = 0,
    display_width: Callable[[str], int] = cell_len,
) -> int:
    """How many grid columns fit in `width` for the given labels."""
    cell = cell_width_for(labels, extra, display_width)
    if border:
        # Border costs one rule per column plus padding on both sides
        return max(1, (width - 3) // (cell + 3))
    return max(1, (width - 2) // (cell + 2))


def _position(page: Sequence[int], cursor: int | None) -> int:
    try:
        return page.index(cursor)
    except ValueError:
        return 0


class _Navigation:
    """Jumps and page flips shared by both topologies."""

    def move(self, state: PickerState, action: Action) -> PickerState:
        if state.cursor is None or not state.filtered:
            return state
        handler = {
            Action.MOVE_UP: self.up,
            Action.MOVE_DOWN: self.down,
            Action.MOVE_LEFT: self.left,
            Action.MOVE_RIGHT: self.right,
            Action.HOME: self.home,
            Action.END: self.end,
            Action.PAGE_NEXT: self.next_page,
            Action.PAGE_PREV: self.prev_page,
        }.get(action)
        if handler is None:
            return state
        return handler(state)

    def up(self, state: PickerState) -> PickerState:
        return state

    def down(self, state: PickerState) -> PickerState:
        return state

    def left(self, state: PickerState) -> PickerState:
        return state

    def right(self, state: PickerState) -> PickerState:
        return state

    def home(self, state: PickerState) -> PickerState:
        return replace(state, cursor=state.filtered[0], page=0)

    def end(self, state: PickerState) -> PickerState:
        last = len(state.filtered) - 1
        return replace(state, cursor=state.filtered[last], page=page_of(last, state.page_size))

    def next_page(self, state: PickerState) -> PickerState:
        if state.page >= state.total_pages - 1:
            return state
        return self._load_page(state, state.page + 1, first=True)

    def prev_page(self, state: PickerState) -> PickerState:
        if state.page <= 0:
            return state
        return self._load_page(state, state.page - 1, first=True)

    @staticmethod
    def _load_page(state: PickerState, page: int, first: bool) -> PickerState:
        entries = page_indices(state.filtered, state.page_size, page)
        if not entries:
            return state
        return replace(state, page=page, cursor=entries[0] if first else entries[-1])


class LineNavigation(_Navigation):
    """1D list: Up/Down wrap across pages, Left/Right do nothing."""

    grid = False

    def up(self, state: PickerState) -> PickerState:
        entries = state.page_indices
        pos = _position(entries, state.cursor)
        if pos > 0:
            return replace(state, cursor=entries[pos - 1])
        pages = total_pages(state.filtered, state.page_size)
        previous = pages - 1 if state.page == 0 else state.page - 1
        return self._load_page(state, previous, first=False)

    def down(self, state: PickerState) -> PickerState:
        entries = state.page_indices
        pos = _position(entries, state.cursor)
        if pos < len(entries) - 1:
            return replace(state, cursor=entries[pos + 1])
        pages = total_pages(state.filtered, state.page_size)
        following = 0 if state.page >= pages - 1 else state.page + 1
        return self._load_page(state, following, first=True)


class GridNavigation(_Navigation):
    """2D grid over the current page.

    Left/Right walk the filtered order and stop at the ends. Up/Down jump a
    row and wrap to the same column on the opposite edge.
    """

    grid = True

    def left(self, state: PickerState) -> PickerState:
        entries = state.page_indices
        pos = _position(entries, state.cursor)
        if pos > 0:
            return replace(state, cursor=entries[pos - 1])
        return self.prev_page_end(state)

    def right(self, state: PickerState) -> PickerState:
        entries = state.page_indices
        pos = _position(entries, state.cursor)
        if pos < len(entries) - 1:
            return replace(state, cursor=entries[pos + 1])
        return self.next_page(state)

    def prev_page_end(self, state: PickerState) -> PickerState:
        if state.page <= 0:
            return state
        return self._load_page(state, state.page - 1, first=False)

    def up(self, state: PickerState) -> PickerState:
        entries = state.page_indices
        columns = state.grid_columns
        pos = _position(entries, state.cursor)
        target = pos - columns
        if target < 0:
            rows = -(-len(entries) // columns)
            target = min((rows - 1) * columns + pos % columns, len(entries) - 1)
        return replace(state, cursor=entries[target])

    def down(self, state: PickerState) -> PickerState:
        entries = state.page_indices
        columns = state.grid_columns
        pos = _position(entries, state.cursor)
        target = pos + columns
        if target > len(entries) - 1:
            target = pos % columns
        return replace(state, cursor=entries[target])
