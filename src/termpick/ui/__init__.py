"""UI module."""

from .base import MenuUI, Renderer, Terminal
from .render import PickerRenderer
from .rich_menu import RichTerminalMenu

__all__ = [
    "MenuUI",
    "PickerRenderer",
    "Renderer",
    "RichTerminalMenu",
    "Terminal",
]
