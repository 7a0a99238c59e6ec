"""The blocking render/read/transition loop."""

from __future__ import annotations

import logging

from termpick.engine import PickerEngine
from termpick.keys import KeyReader, Mode, decode
from termpick.state import PickerState
from termpick.ui.base import Renderer, Terminal

logger = logging.getLogger("termpick.loop")


def line_count(frame: str) -> int:
    return frame.count("\n") + 1


def to_raw(frame: str) -> str:
    """Raw mode does not return the carriage on newline."""
    return frame.replace("\r\n", "\n").replace("\n", "\r\n")


class InteractionLoop:
    """Drives one picker until it is confirmed or cancelled.

    Each keystroke, recognised or not, clears the previous frame and draws a
    fresh one. Raw mode is held for the whole loop and released on every
    exit path.
    """

    def __init__(self, engine: PickerEngine, terminal: Terminal, render: Renderer) -> None:
        self.engine = engine
        self.terminal = terminal
        self.render = render
        self.keymap = engine.keymap

    def run(self, state: PickerState) -> PickerState:
        reader = KeyReader(self.terminal.read_one_unit, self.terminal.has_pending_input)
        with self.terminal.raw_mode():
            while True:
                frame = self.render(state)
                self.terminal.write(to_raw(frame))
                lines = line_count(frame)

                key = reader.read_key()
                command = decode(key, state.mode, self.keymap)
                state = self.engine.transition(state, command)
                logger.debug(
                    "key=%r action=%s mode=%s cursor=%s filter=%r",
                    key,
                    command.action.value,
                    state.mode.value,
                    state.cursor,
                    state.filter_text,
                )

                if state.mode is Mode.CONFIRMED:
                    # Leave the last frame on screen
                    self.terminal.write("\r\n")
                    return state
                self.terminal.clear_lines(lines)
                if state.mode is Mode.CANCELLED:
                    return state
