"""Public pickers.

`run` is the generic entry point; `select`, `multi_select`, `select_grid`
and `multi_select_grid` are thin wrappers that pick the navigation topology
and selection discipline.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from rich.cells import cell_len

from termpick.config import PickerConfig, preselected_indices
from termpick.engine import PickerEngine
from termpick.keys import Mode
from termpick.loop import InteractionLoop
from termpick.models import Cancelled, Confirmed, Item, Outcome, make_items
from termpick.selection import SelectionSet
from termpick.state import PickerState
from termpick.ui.base import Renderer, Terminal
from termpick.ui.render import PickerRenderer

logger = logging.getLogger("termpick.widgets")


def initial_state(
    items: tuple[Item, ...],
    config: PickerConfig,
    *,
    multi: bool = False,
    grid: bool = False,
    width: int = 80,
) -> PickerState:
    """Starting state: cursor on the first match, preselections applied."""
    selection = SelectionSet(min=config.min_selections, max=config.max_selections)
    if multi and config.preselected:
        selection = selection.preselect(preselected_indices(items, config.preselected), len(items))
    state = PickerState(
        items=items,
        selection=selection,
        page_size=config.page_size,
        columns=config.columns if grid else 1,
        border=grid and config.border is not None,
        cell_extra=cell_len(config.grid_marker) if grid and multi else 0,
        width=width,
    )
    return state.with_filter(config.filter_text)


def run(
    items: Iterable[Any],
    config: PickerConfig | None = None,
    *,
    multi: bool = False,
    grid: bool = False,
    terminal: Terminal | None = None,
    renderer: Renderer | None = None,
) -> Outcome:
    """Run a picker and return `Confirmed(values)` or `Cancelled()`.

    An empty item set is cancelled immediately without touching the terminal.
    """
    config = config or PickerConfig()
    item_set = make_items(items)
    if not item_set:
        return Cancelled()

    owned = terminal is None
    if terminal is None:
        from termpick.ui.terminal import TerminalController

        terminal = TerminalController.open()
    try:
        engine = PickerEngine.create(grid=grid, multi=multi)
        renderer = renderer or PickerRenderer(config, multi=multi, grid=grid)
        state = initial_state(item_set, config, multi=multi, grid=grid, width=terminal.width())
        logger.debug("starting picker: %d items multi=%s grid=%s", len(item_set), multi, grid)
        final = InteractionLoop(engine, terminal, renderer).run(state)
    finally:
        if owned:
            terminal.close()  # type: ignore[attr-defined]

    if final.mode is not Mode.CONFIRMED:
        return Cancelled()
    return Confirmed(tuple(item_set[i].value for i in engine.confirmed_indices(final)))


def select(items: Iterable[Any], config: PickerConfig | None = None, **kwargs: Any) -> Outcome:
    """Pick one item from a vertical list."""
    return run(items, config, **kwargs)


def multi_select(
    items: Iterable[Any], config: PickerConfig | None = None, **kwargs: Any
) -> Outcome:
    """Pick any number of items from a vertical list."""
    return run(items, config, multi=True, **kwargs)


def select_grid(items: Iterable[Any], config: PickerConfig | None = None, **kwargs: Any) -> Outcome:
    """Pick one item from a grid."""
    return run(items, config, grid=True, **kwargs)


def multi_select_grid(
    items: Iterable[Any], config: PickerConfig | None = None, **kwargs: Any
) -> Outcome:
    """Pick any number of items from a grid."""
    return run(items, config, multi=True, grid=True, **kwargs)

