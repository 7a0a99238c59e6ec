"""Data models for termpick."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

_MISSING: Any = object()


@dataclass(frozen=True)
class Item:
    """Immutable selectable item.

    `value` is what a confirmed selection returns; it defaults to `label`.
    Filtering always reads `label`.
    """

    label: str
    value: Any = field(default=_MISSING, compare=False)

    def __post_init__(self) -> None:
        if self.value is _MISSING:
            object.__setattr__(self, "value", self.label)


def make_items(raw: Iterable[Any]) -> tuple[Item, ...]:
    """Normalise caller input into an ItemSet.

    Accepts `Item` objects, bare labels and `(label, value)` pairs.
    """
    items: list[Item] = []
    for entry in raw:
        if isinstance(entry, Item):
            items.append(entry)
        elif isinstance(entry, tuple) and len(entry) == 2:
            items.append(Item(str(entry[0]), entry[1]))
        else:
            items.append(Item(str(entry)))
    return tuple(items)


@dataclass(frozen=True)
class Confirmed:
    """The user confirmed; `values` are in absolute-index order."""

    values: tuple[Any, ...]

    @property
    def value(self) -> Any:
        """First confirmed value (the only one for single-pick widgets)."""
        return self.values[0] if self.values else None


@dataclass(frozen=True)
class Cancelled:
    """The user cancelled, or there was nothing to pick from."""


Outcome = Confirmed | Cancelled
