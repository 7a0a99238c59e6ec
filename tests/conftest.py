"""Pytest fixtures for termpick tests."""

import contextlib

import pytest


class FakeTerminal:
    """Scripted terminal: feeds `keys` one character at a time."""

    def __init__(self, keys: str = "", width: int = 80):
        self.units = list(keys)
        self._width = width
        self.writes: list[str] = []
        self.cleared: list[int] = []
        self.raw = False
        self.raw_entered = 0
        self.raw_released = 0

    @contextlib.contextmanager
    def raw_mode(self):
        self.raw = True
        self.raw_entered += 1
        try:
            yield
        finally:
            self.raw = False
            self.raw_released += 1

    def read_one_unit(self) -> str | None:
        return self.units.pop(0) if self.units else None

    def has_pending_input(self) -> bool:
        return bool(self.units)

    def write(self, text: str) -> None:
        self.writes.append(text)

    def clear_lines(self, count: int) -> None:
        self.cleared.append(count)

    def width(self) -> int:
        return self._width


class CountingRenderer:
    """Wraps a renderer and records every frame it produces."""

    def __init__(self, inner):
        self.inner = inner
        self.states = []

    def __call__(self, state):
        self.states.append(state)
        return self.inner(state)


@pytest.fixture(autouse=True)
def clear_caches(tmp_path, monkeypatch):
    """Isolate settings from the real user config."""
    from termpick.config import clear_settings_cache

    monkeypatch.setenv("TERMPICK_CONFIG_DIR", str(tmp_path / "termpick-config"))
    clear_settings_cache()

    yield

    clear_settings_cache()


@pytest.fixture
def make_terminal():
    """Factory for scripted terminals."""

    def _make(keys: str = "", width: int = 80) -> FakeTerminal:
        return FakeTerminal(keys, width)

    return _make


@pytest.fixture
def counting_renderer():
    """Factory wrapping a renderer so tests can count redraws."""
    return CountingRenderer
