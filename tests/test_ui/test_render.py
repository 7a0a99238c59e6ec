"""Tests for the rich renderer."""

import re
from dataclasses import replace

import pytest

from termpick.config import PickerConfig
from termpick.keys import Mode
from termpick.models import make_items
from termpick.theme import THEMES
from termpick.ui.render import PickerRenderer, display_width, pad_to_width
from termpick.widgets import initial_state

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def plain(text: str) -> list[str]:
    return [line.rstrip() for line in ANSI_RE.sub("", text).split("\n")]


def render(labels, config=None, *, multi=False, grid=False, width=80, **changes):
    config = config or PickerConfig()
    state = initial_state(make_items(labels), config, multi=multi, grid=grid, width=width)
    if changes:
        state = replace(state, **changes).reclamped()
    return PickerRenderer(config, multi=multi, grid=grid)(state)


class TestList:
    def test_cursor_marks_focused_item(self):
        lines = plain(render(["apple", "banana"]))
        assert lines[0] == "> apple"
        assert lines[1] == "  banana"

    def test_help_below_items(self):
        lines = plain(render(["apple"]))
        assert lines[1] == ""
        assert "enter: select" in lines[2]

    def test_help_can_be_hidden(self):
        lines = plain(render(["apple"], PickerConfig(show_help=False)))
        assert lines == ["> apple"]

    def test_custom_cursor(self):
        lines = plain(render(["a", "b"], PickerConfig(cursor="→ ", show_help=False)))
        assert lines == ["→ a", "  b"]

    def test_multi_markers(self):
        config = PickerConfig(preselected=(1,), show_help=False)
        lines = plain(render(["a", "b"], config, multi=True))
        assert lines == ["> [ ] a", "  [x] b"]

    def test_filter_header(self):
        lines = plain(render(["apple", "banana", "apricot"], mode=Mode.FILTER, filter_text="ap"))
        assert lines[0] == "Filter: ap█ (2/3)"
        assert lines[1] == ""
        assert lines[2] == "> apple"

    def test_page_header(self):
        lines = plain(render(list("ABCDE"), PickerConfig(page_size=2, show_help=False)))
        assert lines == ["[Page 1/3]", "", "> A", "  B"]

    def test_no_matches(self):
        lines = plain(render(["a"], PickerConfig(show_help=False), filter_text="zzz"))
        assert "(no matches)" in lines


class TestGrid:
    def test_focused_cell_bracketed(self):
        config = PickerConfig(columns=2, border=None, show_help=False)
        lines = plain(render(list("ABCD"), config, grid=True))
        assert len(lines) == 2
        assert "[A]" in lines[0]
        assert "B" in lines[0]
        assert "C" in lines[1] and "D" in lines[1]

    def test_selected_cells_marked(self):
        config = PickerConfig(columns=2, border=None, show_help=False, preselected=(0, 1))
        lines = plain(render(list("ABCD"), config, multi=True, grid=True))
        assert "[*A]" in lines[0]
        assert "*B" in lines[0]

    def test_border(self):
        config = PickerConfig(columns=2, show_help=False)
        output = "\n".join(plain(render(list("ABCD"), config, grid=True)))
        assert "╭" in output
        assert "╯" in output

    def test_ascii_border(self):
        config = PickerConfig(columns=2, border="ascii", show_help=False)
        output = "\n".join(plain(render(list("ABCD"), config, grid=True)))
        assert "+" in output
        assert "╭" not in output

    def test_grid_fits_width(self):
        config = PickerConfig(show_help=False)
        lines = plain(render([f"item{i}" for i in range(30)], config, grid=True, width=40))
        assert all(display_width(line) <= 40 for line in lines)


def test_render_is_pure():
    """Rendering the same state twice gives the same frame."""
    config = PickerConfig()
    state = initial_state(make_items(["a", "b"]), config)
    renderer = PickerRenderer(config)
    assert renderer(state) == renderer(state)


def test_theme_colours_output(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.setenv("COLORTERM", "truecolor")
    monkeypatch.delenv("NO_COLOR", raising=False)
    themed = render(["a", "b"], PickerConfig(theme=THEMES["dracula"]))
    plain_output = render(["a", "b"], PickerConfig())
    assert themed != plain_output
    assert "38;2;" in themed
    assert plain(themed) == plain(plain_output)


def test_pad_to_width_counts_cells():
    assert pad_to_width("日本", 6) == "日本  "
    assert pad_to_width("long", 2) == "long"
