"""UI protocols: swappable menus, terminals and renderers."""

from contextlib import AbstractContextManager
from typing import Protocol

from termpick.state import PickerState


class MenuUI(Protocol):
    """Protocol for swappable menu implementations."""

    def select(self, options: list[str], title: str = "") -> int | None:
        """Show selection menu, return index or None if cancelled."""
        ...

    def multi_select(self, options: list[str], selected: list[bool], title: str = "") -> list[int]:
        """Checkboxes, return selected indices."""
        ...

    def confirm(self, message: str) -> bool:
        """Yes/no prompt."""
        ...

    def input(self, prompt: str) -> str | None:
        """Text input, None if cancelled."""
        ...


class Terminal(Protocol):
    """What the interaction loop needs from a terminal."""

    def raw_mode(self) -> AbstractContextManager[None]:
        """Hold raw mode (and a hidden cursor) for the duration of the block."""
        ...

    def read_one_unit(self) -> str | None:
        """Block for one character; None at end of input."""
        ...

    def has_pending_input(self) -> bool:
        ...

    def write(self, text: str) -> None:
        ...

    def clear_lines(self, count: int) -> None:
        """Erase the last `count` written lines and return to their start."""
        ...

    def width(self) -> int:
        ...


class Renderer(Protocol):
    """Pure function of state to styled text. Safe to call any number of times."""

    def __call__(self, state: PickerState) -> str: ...
