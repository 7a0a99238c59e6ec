"""Configuration: persisted user settings and per-call picker options."""

import json
import os
from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from termpick.pagination import DEFAULT_PAGE_SIZE
from termpick.theme import Theme, get_theme

# Module-level cache for singleton pattern
_settings_cache: "Settings | None" = None

BORDERS = ("rounded", "normal", "thick", "double", "ascii")


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing or settings reload."""
    global _settings_cache
    _settings_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting TERMPICK_CONFIG_DIR env var."""
    config_dir = os.environ.get("TERMPICK_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "termpick"


class SettingsMeta:
    """Schema definition - separate from runtime state."""

    TOGGLES: dict[str, str] = {
        "use_theme": "Colour pickers with the configured theme",
        "show_help": "Show key help below pickers",
    }

    SETTINGS: dict[str, str] = {
        "page_size": "Items per page (0 = no paging)",
        "theme": "Theme name (dracula|nord|gruvbox|monokai, empty = none)",
        "border": "Grid border (rounded|normal|thick|double|ascii|none)",
        "cursor": "Cursor glyph shown next to the focused item",
    }


class Settings:
    """User settings with env override support."""

    DEFAULTS: dict[str, Any] = {
        # Toggles
        "use_theme": True,
        "show_help": True,
        # Settings
        "page_size": DEFAULT_PAGE_SIZE,
        "theme": "",
        "border": "rounded",
        "cursor": "> ",
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Settings":
        """Factory method - explicit loading with caching."""
        global _settings_cache

        if _settings_cache is not None and config_dir is None:
            return _settings_cache

        settings = cls(config_dir)
        settings._load_from_file()
        settings._apply_env_overrides()

        if config_dir is None:
            _settings_cache = settings

        return settings

    def __getattr__(self, name: str) -> Any:
        """Access settings values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Settings has no attribute '{name}'")

    def as_dict(self) -> dict[str, Any]:
        return {key: getattr(self, key) for key in self.DEFAULTS}

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Return (attr, description, enabled) for display."""
        return [
            (name, desc, bool(getattr(self, name))) for name, desc in SettingsMeta.TOGGLES.items()
        ]

    def set(self, key: str, value: Any) -> None:
        """Set value and persist."""
        self._data[key] = value
        self._save()

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    self._data = json.loads(content)
            except json.JSONDecodeError:
                # Corrupted file - use defaults, will be fixed on next save
                self._data = {}

    def _save(self) -> None:
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(self._data, indent=2))

    def _apply_env_overrides(self) -> None:
        """Apply TERMPICK_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"TERMPICK_{key.upper()}"
            if env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        return value


@dataclass(frozen=True)
class PickerConfig:
    """Options for one picker run.

    Styles are rich style strings (e.g. "bold cyan"); None falls back to the
    theme colour when `use_theme` is on and a theme is set, else no style.
    """

    cursor: str = "> "
    cursor_style: str | None = None
    focused_style: str | None = None
    item_style: str | None = None
    selected_item_style: str | None = None
    selected_marker: str = "[x] "
    unselected_marker: str = "[ ] "
    # Grids mark selected cells with a single glyph instead of a checkbox
    grid_marker: str = "*"
    selected_marker_style: str | None = None
    unselected_marker_style: str | None = None
    help_style: str | None = None
    filter_style: str | None = None
    border_style: str | None = None
    min_selections: int = 0
    max_selections: int | None = None
    page_size: int | None = DEFAULT_PAGE_SIZE
    # None = fit as many columns as the terminal allows
    columns: int | None = None
    border: str | None = "rounded"
    show_help: bool = True
    use_theme: bool = True
    theme: Theme | None = None
    # Item values, or absolute indices for ints that match no value
    preselected: tuple[Any, ...] = field(default=())
    filter_text: str = ""

    def __post_init__(self) -> None:
        if self.min_selections < 0:
            raise ValueError("min_selections must be >= 0")
        if self.max_selections is not None and self.max_selections < self.min_selections:
            raise ValueError("max_selections must be >= min_selections")
        if self.columns is not None and self.columns < 1:
            raise ValueError("columns must be a positive integer or None")
        if self.border is not None and self.border not in BORDERS:
            raise ValueError(f"border must be one of {', '.join(BORDERS)} or None")

    @property
    def active_theme(self) -> Theme | None:
        return self.theme if self.use_theme else None

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "PickerConfig":
        """Build a config from user settings; explicit overrides win."""
        border = settings.border if settings.border in BORDERS else None
        values: dict[str, Any] = {
            "cursor": settings.cursor,
            "page_size": settings.page_size,
            "border": border,
            "show_help": bool(settings.show_help),
            "use_theme": bool(settings.use_theme),
            "theme": get_theme(settings.theme),
        }
        known = {f.name for f in fields(cls)}
        values.update({k: v for k, v in overrides.items() if k in known})
        return cls(**values)


def preselected_indices(items: Iterable[Any], wanted: Iterable[Any]) -> list[int]:
    """Resolve preselections given as item values or absolute indices.

    A value match wins, so with integer item values `3` means the item whose
    value is 3; an int that matches no value is taken as an index.
    """
    values = [item.value for item in items]
    indices: list[int] = []
    for selection in wanted:
        if isinstance(selection, bool):
            continue
        if selection in values:
            indices.append(values.index(selection))
        elif isinstance(selection, int) and selection >= 0:
            indices.append(selection)
    return indices
