"""Tests for picker header and help text."""

from dataclasses import replace

from termpick.keys import Mode
from termpick.models import make_items
from termpick.selection import SelectionSet
from termpick.state import PickerState
from termpick.ui.formatting import format_filter_input, format_help, format_pagination


def make_state(count=3, **kwargs):
    return PickerState(items=make_items(str(i) for i in range(count)), **kwargs)


def test_filter_input_while_typing():
    """Typing shows the cursor block and the narrowed count."""
    assert format_filter_input("ap", True, 2, 3) == "Filter: ap█ (2/3)"


def test_filter_input_committed():
    """A committed filter drops the cursor block."""
    assert format_filter_input("ap", False, 2, 3) == "Filter: ap (2/3)"


def test_filter_input_hides_full_count():
    assert format_filter_input("", True, 3, 3) == "Filter: █"


def test_pagination():
    assert format_pagination(0, 3) == "[Page 1/3]"
    assert format_pagination(0, 1) == ""


def test_help_single_list():
    help_text = format_help(make_state(), multi=False, grid=False)
    assert help_text == "↑/↓: navigate | enter: select | /: filter | q: cancel"


def test_help_grid_with_pages():
    help_text = format_help(make_state(5, page_size=2), multi=False, grid=True)
    assert help_text.startswith("hjkl/arrows: navigate | [/]: page")


def test_help_filter_mode():
    help_text = format_help(make_state(mode=Mode.FILTER), multi=True, grid=False)
    assert help_text == "type to filter | enter: apply | esc: clear"


def test_help_multi_needs_more():
    """Below the minimum the confirm hint counts what is missing."""
    state = make_state(selection=SelectionSet(frozenset({0}), min=3))
    assert "enter: confirm (2 more needed)" in format_help(state, multi=True, grid=False)


def test_help_multi_at_max():
    state = make_state(selection=SelectionSet(frozenset({0, 1}), max=2))
    help_text = format_help(state, multi=True, grid=False)
    assert "space: toggle (max reached)" in help_text
    assert "enter: confirm (2 selected)" in help_text


def test_help_multi_plain():
    state = replace(make_state(), selection=SelectionSet(frozenset({1})))
    help_text = format_help(state, multi=True, grid=False)
    assert "space: toggle |" in help_text
    assert "a/n: all/none" in help_text
    assert "(1 selected)" in help_text
