"""Selection sets and the two selection disciplines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from termpick.state import PickerState


@dataclass(frozen=True)
class SelectionSet:
    """Selected absolute indices under min/max cardinality bounds.

    May sit below `min` (confirm is blocked), never above `max`.
    """

    indices: frozenset[int] = frozenset()
    min: int = 0
    max: int | None = None

    def __post_init__(self) -> None:
        if self.min < 0:
            raise ValueError("min_selections must be >= 0")
        if self.max is not None and self.max < self.min:
            raise ValueError("max_selections must be >= min_selections")

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __len__(self) -> int:
        return len(self.indices)

    def size(self) -> int:
        return len(self.indices)

    def at_max(self) -> bool:
        return self.max is not None and len(self.indices) >= self.max

    def can_confirm(self) -> bool:
        return len(self.indices) >= self.min

    def needed(self) -> int:
        """How many more selections before confirm is allowed."""
        return max(0, self.min - len(self.indices))

    def sorted(self) -> list[int]:
        return sorted(self.indices)

    def toggle(self, index: int) -> SelectionSet:
        if index in self.indices:
            return replace(self, indices=self.indices - {index})
        if self.at_max():
            return self
        return replace(self, indices=self.indices | {index})

    def select_all(self, visible: Iterable[int]) -> SelectionSet:
        """Add unselected members of `visible` in order until `max` is hit."""
        added = set(self.indices)
        for index in visible:
            if self.max is not None and len(added) >= self.max:
                break
            added.add(index)
        return replace(self, indices=frozenset(added))

    def select_none(self, visible: Iterable[int]) -> SelectionSet:
        """Drop selections that are in `visible`; others are untouched."""
        return replace(self, indices=self.indices - frozenset(visible))

    def preselect(self, indices: Iterable[int], limit: int) -> SelectionSet:
        """Seed selections by absolute index, ignoring anything outside `[0, limit)`."""
        return self.select_all(i for i in indices if 0 <= i < limit)


class SelectionStrategy(Protocol):
    """How Toggle and Confirm behave for a widget."""

    multi: bool

    def toggle(self, state: PickerState) -> PickerState: ...

    def can_confirm(self, state: PickerState) -> bool: ...

    def confirmed_indices(self, state: PickerState) -> list[int]: ...


class SingleSelection:
    """Replace-one: the cursor item is the selection."""

    multi = False

    def toggle(self, state: PickerState) -> PickerState:
        if state.cursor is None:
            return state
        return replace(state, selection=replace(state.selection, indices=frozenset({state.cursor})))

    def can_confirm(self, state: PickerState) -> bool:
        return state.cursor is not None and state.cursor in state.page_indices

    def confirmed_indices(self, state: PickerState) -> list[int]:
        return [] if state.cursor is None else [state.cursor]


class MultiSelection:
    """Toggle-many with min/max bounds."""

    multi = True

    def toggle(self, state: PickerState) -> PickerState:
        if state.cursor is None:
            return state
        return replace(state, selection=state.selection.toggle(state.cursor))

    def can_confirm(self, state: PickerState) -> bool:
        return state.selection.can_confirm()

    def confirmed_indices(self, state: PickerState) -> list[int]:
        return state.selection.sorted()
