"""Rich-based render collaborator.

`PickerRenderer` is a pure function of `PickerState`: it builds rich
renderables and exports them as ANSI text. It never touches the terminal,
so it can be called for previews and tests as often as needed.
"""

from __future__ import annotations

import io

from rich import box
from rich.cells import cell_len
from rich.console import Console, Group, RenderableType
from rich.style import Style
from rich.table import Table
from rich.text import Text

from termpick.config import PickerConfig
from termpick.keys import Mode
from termpick.navigation import cell_width_for
from termpick.state import PickerState
from termpick.ui.formatting import NO_MATCHES, format_filter_input, format_help, format_pagination

BOXES: dict[str, box.Box] = {
    "rounded": box.ROUNDED,
    "normal": box.SQUARE,
    "thick": box.HEAVY,
    "double": box.DOUBLE,
    "ascii": box.ASCII,
}


def display_width(text: str) -> int:
    return cell_len(text)


def apply_style(text: str, style: Style | str | None) -> Text:
    """Wrap `text` in a rich Text, styled when `style` is given."""
    return Text(text, style=style or "")


def pad_to_width(text: str, width: int) -> str:
    missing = width - display_width(text)
    return text + " " * missing if missing > 0 else text


class PickerRenderer:
    """Renders list and grid pickers from their state."""

    def __init__(self, config: PickerConfig, *, multi: bool = False, grid: bool = False) -> None:
        self.config = config
        self.multi = multi
        self.grid = grid

    def __call__(self, state: PickerState) -> str:
        return self.to_ansi(self.build(state), state.width)

    @staticmethod
    def to_ansi(renderable: RenderableType, width: int) -> str:
        console = Console(
            file=io.StringIO(),
            width=max(width, 1),
            force_terminal=True,
            highlight=False,
            emoji=False,
        )
        with console.capture() as capture:
            console.print(renderable, end="")
        # Renderables end their last line; the frame should not
        return capture.get().removesuffix("\n")

    # Style resolution: explicit style, then theme colour, then fallback

    def _style(self, explicit: str | None, role: str, bold: bool = False) -> Style | None:
        if explicit:
            return Style.parse(explicit)
        theme = self.config.active_theme
        if theme is not None:
            return theme.style(role, bold=bold)
        return Style(bold=True) if bold else None

    def build(self, state: PickerState) -> RenderableType:
        parts: list[RenderableType] = []
        header = self._header(state)
        if header is not None:
            parts.extend([header, Text("")])
        parts.append(self._grid(state) if self.grid else self._list(state))
        if self.config.show_help:
            help_style = self._style(self.config.help_style, "muted")
            help_text = format_help(state, multi=self.multi, grid=self.grid)
            parts.extend([Text(""), apply_style(help_text, help_style)])
        return Group(*parts)

    def _header(self, state: PickerState) -> Text | None:
        filter_style = self._style(self.config.filter_style, "muted")
        pieces: list[str] = []
        in_filter = state.mode is Mode.FILTER
        if in_filter or state.filter_text:
            pieces.append(
                format_filter_input(
                    state.filter_text, in_filter, len(state.filtered), len(state.items)
                )
            )
        pagination = format_pagination(state.page, state.total_pages)
        if pagination:
            pieces.append(pagination)
        if not pieces:
            return None
        return apply_style(" ".join(pieces), filter_style)

    def _list(self, state: PickerState) -> Text:
        config = self.config
        if not state.page_indices:
            return apply_style(NO_MATCHES, self._style(config.help_style, "muted"))

        cursor_style = self._style(config.cursor_style, "emphasis")
        focused_style = self._style(config.focused_style, "header")
        selected_item_style = self._style(config.selected_item_style, "success")
        selected_marker_style = self._style(config.selected_marker_style, "success")
        unselected_marker_style = self._style(config.unselected_marker_style, "muted")
        blank_cursor = " " * display_width(config.cursor)

        lines: list[Text] = []
        for index in state.page_indices:
            focused = index == state.cursor
            selected = index in state.selection
            line = Text()
            if focused:
                line.append_text(apply_style(config.cursor, cursor_style))
            else:
                line.append(blank_cursor)
            if self.multi:
                if selected:
                    line.append_text(apply_style(config.selected_marker, selected_marker_style))
                else:
                    line.append_text(
                        apply_style(config.unselected_marker, unselected_marker_style)
                    )
            if focused:
                style = focused_style
            elif selected and self.multi:
                style = selected_item_style
            else:
                style = Style.parse(config.item_style) if config.item_style else None
            line.append_text(apply_style(state.items[index].label, style))
            lines.append(line)
        return Text("\n").join(lines)

    def _grid(self, state: PickerState) -> RenderableType:
        config = self.config
        entries = state.page_indices
        if not entries:
            return apply_style(NO_MATCHES, self._style(config.help_style, "muted"))

        columns = state.grid_columns
        marker = config.grid_marker if self.multi else ""
        labels = [state.items[i].label for i in entries]
        width = cell_width_for(labels, state.cell_extra)
        cursor_style = self._style(config.cursor_style, "header", bold=True)
        selected_style = self._style(config.selected_item_style, "success")
        item_style = Style.parse(config.item_style) if config.item_style else None

        cells: list[Text] = []
        for index in entries:
            label = state.items[index].label
            focused = index == state.cursor
            selected = self.multi and index in state.selection
            prefix = marker if selected else " " * display_width(marker)
            content = f"[{prefix}{label}]" if focused else f" {prefix}{label} "
            if focused:
                style = cursor_style
            elif selected:
                style = selected_style
            else:
                style = item_style
            cells.append(apply_style(pad_to_width(content, width), style))

        table = Table(
            show_header=False,
            show_edge=config.border is not None,
            box=BOXES.get(config.border or "", None),
            padding=(0, 1),
            border_style=self._style(config.border_style, "muted") or "",
            pad_edge=config.border is not None,
            expand=False,
        )
        for _ in range(columns):
            table.add_column(width=width, no_wrap=True)
        for start in range(0, len(cells), columns):
            row = cells[start : start + columns]
            row += [Text(" " * width)] * (columns - len(row))
            table.add_row(*row)
        return table
