"""CLI commands."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from termpick.config import PickerConfig, Settings

app = typer.Typer(
    name="termpick",
    help="Pick items interactively from a list or grid.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("termpick.cli")


def _get_settings() -> Settings:
    """Lazy import and load settings."""
    from termpick.config import Settings

    return Settings.load()


def _setup_logging(log_file: str | None) -> None:
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _read_items(items: list[str] | None) -> list[str]:
    """Items from arguments, else one per non-empty stdin line."""
    if items:
        return items
    if sys.stdin.isatty():
        return []
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def _build_config(
    settings: Settings,
    *,
    page_size: int | None,
    columns: int | None,
    min_: int,
    max_: int | None,
    filter_: str,
    theme: str | None,
    no_help: bool,
) -> PickerConfig:
    from termpick.config import PickerConfig
    from termpick.theme import get_theme, theme_names

    overrides: dict = {
        "columns": columns,
        "min_selections": min_,
        "max_selections": max_,
        "filter_text": filter_,
    }
    if page_size is not None:
        overrides["page_size"] = page_size
    if theme is not None:
        resolved = get_theme(theme)
        if resolved is None:
            raise ValueError(f"Unknown theme '{theme}' (available: {', '.join(theme_names())})")
        overrides["theme"] = resolved
    if no_help:
        overrides["show_help"] = False
    return PickerConfig.from_settings(settings, **overrides)


@app.command()
def pick(
    items: Annotated[list[str] | None, typer.Argument(help="Items (default: stdin lines)")] = None,
    multi: Annotated[bool, typer.Option("-m", "--multi", help="Allow picking many")] = False,
    grid: Annotated[bool, typer.Option("-g", "--grid", help="Lay items out in a grid")] = False,
    columns: Annotated[
        int | None, typer.Option("-c", "--columns", help="Grid columns (default: fit width)")
    ] = None,
    page_size: Annotated[
        int | None, typer.Option("-p", "--page-size", help="Items per page (0 = no paging)")
    ] = None,
    min_: Annotated[int, typer.Option("--min", help="Minimum selections (multi)")] = 0,
    max_: Annotated[int | None, typer.Option("--max", help="Maximum selections (multi)")] = None,
    filter_: Annotated[str, typer.Option("-f", "--filter", help="Initial filter text")] = "",
    theme: Annotated[str | None, typer.Option("-t", "--theme", help="Theme name")] = None,
    no_help: Annotated[bool, typer.Option("--no-help", help="Hide key help")] = False,
    log_file: Annotated[str | None, typer.Option("--log-file", help="Write debug log")] = None,
):
    """Pick items and print the chosen values, one per line."""
    from termpick.models import Confirmed
    from termpick.ui.terminal import TerminalModeError
    from termpick.widgets import run

    _setup_logging(log_file)
    choices = _read_items(items)
    if not choices:
        err_console.print("[yellow]Nothing to pick from[/yellow]")
        raise typer.Exit(1)

    try:
        config = _build_config(
            _get_settings(),
            page_size=page_size,
            columns=columns,
            min_=min_,
            max_=max_,
            filter_=filter_,
            theme=theme,
            no_help=no_help,
        )
    except ValueError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(2)

    try:
        result = run(choices, config, multi=multi, grid=grid)
    except TerminalModeError as exc:
        logger.error("terminal unavailable: %s", exc)
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(2)

    if not isinstance(result, Confirmed):
        raise typer.Exit(1)
    for value in result.values:
        typer.echo(value)


@app.command()
def themes():
    """List built-in themes."""
    from termpick.theme import THEMES

    for name in sorted(THEMES):
        theme = THEMES[name]
        r, g, b = theme.header
        console.print(f"[rgb({r},{g},{b})]■[/] {name}")


@app.command()
def config():
    """Show effective settings."""
    from termpick.config import SettingsMeta

    settings = _get_settings()
    console.print(f"[dim]{settings.config_dir / 'config.json'}[/dim]")
    descriptions = {**SettingsMeta.TOGGLES, **SettingsMeta.SETTINGS}
    for key, value in settings.as_dict().items():
        console.print(f"  {key} = {value!r}  [dim]{descriptions.get(key, '')}[/dim]")


def main() -> None:
    app()
