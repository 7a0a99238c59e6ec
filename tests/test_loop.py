"""End-to-end picker runs against a scripted terminal."""

import pytest

from termpick.config import PickerConfig
from termpick.models import Cancelled, Confirmed
from termpick.ui.render import PickerRenderer
from termpick.widgets import multi_select, multi_select_grid, run, select, select_grid

DOWN = "\x1b[B"
ESC = "\x1b"


class TestSelect:
    def test_enter_confirms_cursor(self, make_terminal):
        terminal = make_terminal("j\r")
        assert select(["a", "b", "c"], terminal=terminal) == Confirmed(("b",))

    def test_arrow_keys(self, make_terminal):
        terminal = make_terminal(DOWN + DOWN + "\r")
        assert select(["a", "b", "c"], terminal=terminal).value == "c"

    def test_returns_item_values(self, make_terminal):
        terminal = make_terminal("\r")
        result = select([("Production", "prod"), ("Staging", "stage")], terminal=terminal)
        assert result == Confirmed(("prod",))

    def test_space_confirms(self, make_terminal):
        assert select(["a", "b"], terminal=make_terminal(" ")).value == "a"

    def test_q_cancels(self, make_terminal):
        assert select(["a"], terminal=make_terminal("q")) == Cancelled()

    def test_paging_end_to_end(self, make_terminal):
        config = PickerConfig(page_size=2)
        terminal = make_terminal("jjjjj\r")
        assert select(list("ABCDE"), config, terminal=terminal).value == "A"

    def test_filter_and_confirm(self, make_terminal):
        terminal = make_terminal("/apr\r\r")
        assert select(["apple", "banana", "apricot"], terminal=terminal).value == "apricot"

    def test_filter_then_escape_twice_cancels(self, make_terminal, counting_renderer):
        renderer = counting_renderer(PickerRenderer(PickerConfig()))
        terminal = make_terminal("/x" + ESC + ESC)
        result = select(["apple", "banana"], terminal=terminal, renderer=renderer)
        assert result == Cancelled()
        assert renderer.states[-1].filter_text == ""
        assert len(renderer.states) == 4


class TestMultiSelect:
    def test_toggle_and_confirm(self, make_terminal):
        terminal = make_terminal(" j \r")
        assert multi_select(["a", "b", "c"], terminal=terminal) == Confirmed(("a", "b"))

    def test_values_in_item_order(self, make_terminal):
        terminal = make_terminal("G k \r")
        assert multi_select(["a", "b", "c"], terminal=terminal).values == ("b", "c")

    def test_min_blocks_until_met(self, make_terminal):
        config = PickerConfig(min_selections=2)
        terminal = make_terminal(" \r")
        assert multi_select(["a", "b"], config, terminal=terminal) == Cancelled()

    def test_preselected_values(self, make_terminal):
        config = PickerConfig(preselected=("c", 0))
        terminal = make_terminal("\r")
        assert multi_select(["a", "b", "c"], config, terminal=terminal).values == ("a", "c")

    def test_initial_filter_and_select_all(self, make_terminal):
        config = PickerConfig(filter_text="ap")
        terminal = make_terminal("a\r")
        result = multi_select(["apple", "banana", "apricot"], config, terminal=terminal)
        assert result.values == ("apple", "apricot")


class TestGrid:
    def test_two_dimensional_moves(self, make_terminal):
        config = PickerConfig(columns=2)
        terminal = make_terminal("lj\r")
        assert select_grid(list("ABCD"), config, terminal=terminal).value == "D"

    def test_shift_tab_moves_left(self, make_terminal):
        config = PickerConfig(columns=2)
        terminal = make_terminal("l\x1b[Z\r")
        assert select_grid(list("ABCD"), config, terminal=terminal).value == "A"

    def test_multi_grid(self, make_terminal):
        config = PickerConfig(columns=2)
        terminal = make_terminal(" \t \r")
        assert multi_select_grid(list("ABCD"), config, terminal=terminal).values == ("A", "B")

    def test_auto_columns_use_terminal_width(self, make_terminal, counting_renderer):
        renderer = counting_renderer(PickerRenderer(PickerConfig(), grid=True))
        terminal = make_terminal("q", width=20)
        select_grid(list("ABCDEFGH"), terminal=terminal, renderer=renderer)
        assert renderer.states[0].grid_columns == 2


class TestLoopContract:
    def test_one_redraw_per_keystroke(self, make_terminal, counting_renderer):
        renderer = counting_renderer(PickerRenderer(PickerConfig()))
        terminal = make_terminal("jjz\r")
        select(["a", "b", "c"], terminal=terminal, renderer=renderer)
        assert len(renderer.states) == 4
        # The confirmed frame stays on screen
        assert len(terminal.cleared) == 3

    def test_cancel_clears_last_frame(self, make_terminal):
        terminal = make_terminal("q")
        select(["a", "b"], terminal=terminal)
        assert len(terminal.cleared) == 1

    def test_raw_mode_released(self, make_terminal):
        terminal = make_terminal("\r")
        select(["a"], terminal=terminal)
        assert terminal.raw_entered == 1
        assert terminal.raw_released == 1
        assert not terminal.raw

    def test_end_of_input_cancels(self, make_terminal):
        terminal = make_terminal("jj")
        assert select(["a", "b"], terminal=terminal) == Cancelled()
        assert terminal.raw_released == 1

    def test_end_of_input_in_filter_mode_cancels(self, make_terminal):
        terminal = make_terminal("/ab")
        assert multi_select(["a", "b"], terminal=terminal) == Cancelled()

    def test_empty_items_skip_terminal(self, make_terminal):
        terminal = make_terminal("\r")
        assert run([], terminal=terminal) == Cancelled()
        assert terminal.raw_entered == 0
        assert terminal.writes == []

    def test_raw_mode_released_on_error(self, make_terminal):
        def broken(state):
            raise RuntimeError("render failed")

        terminal = make_terminal("\r")
        with pytest.raises(RuntimeError):
            select(["a"], terminal=terminal, renderer=broken)
        assert terminal.raw_released == 1
        assert not terminal.raw

    def test_frames_use_carriage_returns(self, make_terminal):
        terminal = make_terminal("q")
        select(["a", "b"], terminal=terminal)
        frame = terminal.writes[0]
        assert "\r\n" in frame
        assert "\n" not in frame.replace("\r\n", "")
