"""Shared text for picker headers and help lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termpick.keys import Mode

if TYPE_CHECKING:
    from termpick.state import PickerState

FILTER_PROMPT = "Filter: "
FILTER_CURSOR = "█"
NO_MATCHES = "(no matches)"


def format_filter_input(
    filter_text: str, filter_mode: bool, matched: int | None = None, total: int | None = None
) -> str:
    """Filter prompt line, e.g. `Filter: ap█ (2/3)`.

    The match count is only shown while it is narrower than the full set.
    """
    cursor = FILTER_CURSOR if filter_mode else ""
    count = ""
    if matched is not None and total is not None and matched < total:
        count = f" ({matched}/{total})"
    return f"{FILTER_PROMPT}{filter_text}{cursor}{count}"


def format_pagination(page: int, total_pages: int) -> str:
    """`[Page 2/5]`, or empty when everything fits on one page."""
    if total_pages <= 1:
        return ""
    return f"[Page {page + 1}/{total_pages}]"


def format_help(state: PickerState, *, multi: bool, grid: bool) -> str:
    if state.mode is Mode.FILTER:
        return "type to filter | enter: apply | esc: clear"
    navigate = "hjkl/arrows: navigate" if grid else "↑/↓: navigate"
    paging = " | [/]: page" if state.total_pages > 1 else ""
    if not multi:
        return f"{navigate}{paging} | enter: select | /: filter | q: cancel"

    selection = state.selection
    toggle = "space: toggle (max reached)" if selection.at_max() else "space: toggle"
    if selection.needed():
        confirm = f"enter: confirm ({selection.needed()} more needed)"
    else:
        confirm = f"enter: confirm ({selection.size()} selected)"
    return f"{navigate}{paging} | {toggle} | a/n: all/none | {confirm} | q: cancel"
