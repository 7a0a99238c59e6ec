"""Keystroke decoding.

`KeyReader` turns single input units (characters) into whole keys,
assembling CSI/SS3 escape sequences. `decode` maps a key to a `Command`
for the current mode. Anything unrecognised becomes a no-op.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import readchar

# Numbered Home/End variants sent by rxvt, linux console and tmux
HOME_KEYS = (readchar.key.HOME, "\x1b[1~", "\x1b[7~", "\x1bOH")
END_KEYS = (readchar.key.END, "\x1b[4~", "\x1b[8~", "\x1bOF")
PAGE_DOWN_KEYS = ("\x1b[6~",)
PAGE_UP_KEYS = ("\x1b[5~",)
ENTER_KEYS = (readchar.key.CR, readchar.key.LF)
BACKSPACE_KEYS = (readchar.key.BACKSPACE, "\x08")
# Shift+Tab
BACK_TAB = "\x1b[Z"


class Mode(Enum):
    NORMAL = "normal"
    FILTER = "filter"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    @property
    def done(self) -> bool:
        return self in (Mode.CONFIRMED, Mode.CANCELLED)


class Action(Enum):
    NOOP = "noop"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    HOME = "home"
    END = "end"
    PAGE_NEXT = "page_next"
    PAGE_PREV = "page_prev"
    TOGGLE = "toggle"
    SELECT_ALL = "select_all"
    SELECT_NONE = "select_none"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    ABORT = "abort"
    ENTER_FILTER = "enter_filter"
    APPEND_CHAR = "append_char"
    DELETE_CHAR = "delete_char"
    CLEAR_FILTER = "clear_filter"
    EXIT_FILTER = "exit_filter"
    COMMIT_FILTER = "commit_filter"

    @property
    def is_movement(self) -> bool:
        return self in MOVEMENTS


MOVEMENTS = frozenset(
    {
        Action.MOVE_UP,
        Action.MOVE_DOWN,
        Action.MOVE_LEFT,
        Action.MOVE_RIGHT,
        Action.HOME,
        Action.END,
        Action.PAGE_NEXT,
        Action.PAGE_PREV,
    }
)


@dataclass(frozen=True)
class Command:
    action: Action
    char: str = ""


NOOP = Command(Action.NOOP)
ABORT = Command(Action.ABORT)


def normal_keymap(*, multi: bool = False, grid: bool = False) -> dict[str, Action]:
    """Key bindings for normal (non-filter) mode."""
    keymap: dict[str, Action] = {
        readchar.key.UP: Action.MOVE_UP,
        "k": Action.MOVE_UP,
        readchar.key.DOWN: Action.MOVE_DOWN,
        "j": Action.MOVE_DOWN,
        "g": Action.HOME,
        "G": Action.END,
        "]": Action.PAGE_NEXT,
        readchar.key.CTRL_F: Action.PAGE_NEXT,
        "[": Action.PAGE_PREV,
        readchar.key.CTRL_B: Action.PAGE_PREV,
        "/": Action.ENTER_FILTER,
        readchar.key.SPACE: Action.TOGGLE if multi else Action.CONFIRM,
        "q": Action.CANCEL,
        readchar.key.CTRL_C: Action.CANCEL,
        readchar.key.ESC: Action.CANCEL,
    }
    keymap.update(dict.fromkeys(HOME_KEYS, Action.HOME))
    keymap.update(dict.fromkeys(END_KEYS, Action.END))
    keymap.update(dict.fromkeys(PAGE_DOWN_KEYS, Action.PAGE_NEXT))
    keymap.update(dict.fromkeys(PAGE_UP_KEYS, Action.PAGE_PREV))
    keymap.update(dict.fromkeys(ENTER_KEYS, Action.CONFIRM))
    if multi:
        keymap["a"] = Action.SELECT_ALL
        keymap["n"] = Action.SELECT_NONE
    if grid:
        keymap[readchar.key.LEFT] = Action.MOVE_LEFT
        keymap["h"] = Action.MOVE_LEFT
        keymap[readchar.key.RIGHT] = Action.MOVE_RIGHT
        keymap["l"] = Action.MOVE_RIGHT
        keymap[readchar.key.TAB] = Action.MOVE_RIGHT
        keymap[BACK_TAB] = Action.MOVE_LEFT
    return keymap


def decode(key: str | None, mode: Mode, keymap: dict[str, Action]) -> Command:
    """Map one key to a command. `None` means end of input."""
    if key is None:
        return ABORT
    if mode is Mode.FILTER:
        return _decode_filter(key)
    return Command(keymap.get(key, Action.NOOP))


def _decode_filter(key: str) -> Command:
    if key in (readchar.key.ESC, readchar.key.CTRL_C):
        return Command(Action.EXIT_FILTER)
    if key in ENTER_KEYS:
        return Command(Action.COMMIT_FILTER)
    if key in BACKSPACE_KEYS:
        return Command(Action.DELETE_CHAR)
    if key == readchar.key.CTRL_U:
        return Command(Action.CLEAR_FILTER)
    if len(key) == 1 and key.isprintable():
        return Command(Action.APPEND_CHAR, key)
    return NOOP


class KeyReader:
    """Assembles keys from single input units.

    A bare ESC is only treated as the start of a sequence when more input
    is already waiting and the next unit is `[` or `O`; otherwise the
    unit read ahead is pushed back for the next key. CSI sequences are
    read through their final byte however long they are, so an unknown
    one still decodes as a single key.
    """

    def __init__(
        self,
        read_unit: Callable[[], str | None],
        has_pending: Callable[[], bool] = lambda: True,
    ) -> None:
        self._read_unit = read_unit
        self._has_pending = has_pending
        self._pushback: list[str | None] = []

    def _next(self) -> str | None:
        if self._pushback:
            return self._pushback.pop()
        return self._read_unit()

    def _pending(self) -> bool:
        return bool(self._pushback) or self._has_pending()

    def read_key(self) -> str | None:
        unit = self._next()
        if unit != readchar.key.ESC or not self._pending():
            return unit
        introducer = self._next()
        if introducer not in ("[", "O"):
            self._pushback.append(introducer)
            return readchar.key.ESC
        sequence = readchar.key.ESC + introducer
        while True:
            unit = self._next()
            if unit is None:
                break
            sequence += unit
            # CSI parameter and intermediate bytes are in " "..?; anything else
            # ends it. SS3 takes exactly one
            if introducer == "O" or not " " <= unit <= "?":
                break
        return sequence
