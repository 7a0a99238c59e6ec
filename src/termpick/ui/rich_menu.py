"""Rich + termpick implementation of the MenuUI protocol."""

from dataclasses import replace

from rich.console import Console

from termpick.config import PickerConfig, Settings

CONFIRM_OPTIONS = ["Yes", "No"]


class RichTerminalMenu:
    """MenuUI backed by termpick pickers.

    Pickers are configured from the user's settings; `config` overrides
    them entirely when given.
    """

    def __init__(self, config: PickerConfig | None = None, terminal=None):
        self.console = Console()
        self.config = config
        self.terminal = terminal

    def _config(self, **overrides) -> PickerConfig:
        base = self.config or PickerConfig.from_settings(Settings.load())
        return replace(base, **overrides)

    def _title(self, title: str) -> None:
        if title:
            self.console.print(f"[bold]{title}[/bold]")

    def select(self, options: list[str], title: str = "") -> int | None:
        from termpick.widgets import select

        if not options:
            return None
        self._title(title)
        items = [(option, i) for i, option in enumerate(options)]
        result = select(items, self._config(), terminal=self.terminal)
        return getattr(result, "value", None)

    def multi_select(self, options: list[str], selected: list[bool], title: str = "") -> list[int]:
        from termpick.widgets import multi_select

        if not options:
            return []
        self._title(title)
        preselected = tuple(i for i, s in enumerate(selected) if s)
        items = [(option, i) for i, option in enumerate(options)]
        result = multi_select(items, self._config(preselected=preselected), terminal=self.terminal)
        return list(getattr(result, "values", ()))

    def confirm(self, message: str) -> bool:
        return self.select(CONFIRM_OPTIONS, title=message) == 0

    def input(self, prompt: str) -> str | None:
        try:
            return self.console.input(f"[bold]{prompt}[/bold] ")
        except (KeyboardInterrupt, EOFError):
            return None
