"""termpick - interactive list and grid pickers for the terminal."""

from termpick.config import PickerConfig, Settings
from termpick.models import Cancelled, Confirmed, Item
from termpick.theme import Theme, get_theme
from termpick.widgets import multi_select, multi_select_grid, run, select, select_grid

__version__ = "0.1.0"

__all__ = [
    "Cancelled",
    "Confirmed",
    "Item",
    "PickerConfig",
    "Settings",
    "Theme",
    "get_theme",
    "multi_select",
    "multi_select_grid",
    "run",
    "select",
    "select_grid",
]
