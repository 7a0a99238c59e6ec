"""Pure state transitions for every picker variant.

`PickerEngine` is parameterised by a navigation topology and a selection
discipline; the four public widgets only differ in which pair they pass.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from termpick.keys import Action, Command, Mode, normal_keymap
from termpick.navigation import GridNavigation, LineNavigation
from termpick.selection import MultiSelection, SelectionStrategy, SingleSelection
from termpick.state import PickerState


@dataclass(frozen=True)
class PickerEngine:
    navigation: LineNavigation | GridNavigation
    selection: SelectionStrategy

    @classmethod
    def create(cls, *, grid: bool = False, multi: bool = False) -> PickerEngine:
        navigation = GridNavigation() if grid else LineNavigation()
        selection: SelectionStrategy = MultiSelection() if multi else SingleSelection()
        return cls(navigation, selection)

    @property
    def keymap(self) -> dict[str, Action]:
        return normal_keymap(multi=self.selection.multi, grid=self.navigation.grid)

    def transition(self, state: PickerState, command: Command) -> PickerState:
        """Apply one command. Finished states absorb everything."""
        if state.done:
            return state
        if command.action is Action.ABORT:
            return replace(state, mode=Mode.CANCELLED)
        if state.mode is Mode.FILTER:
            return self._filter_transition(state, command)
        return self._normal_transition(state, command)

    def _normal_transition(self, state: PickerState, command: Command) -> PickerState:
        action = command.action
        if action.is_movement:
            return self.navigation.move(state, action)
        if action is Action.TOGGLE:
            return self.selection.toggle(state)
        if action is Action.SELECT_ALL and self.selection.multi:
            return replace(state, selection=state.selection.select_all(state.filtered))
        if action is Action.SELECT_NONE and self.selection.multi:
            return replace(state, selection=state.selection.select_none(state.filtered))
        if action is Action.ENTER_FILTER:
            return replace(state, mode=Mode.FILTER)
        if action is Action.CONFIRM:
            if self.selection.can_confirm(state):
                return replace(state, mode=Mode.CONFIRMED)
            return state
        if action is Action.CANCEL:
            if state.filter_text:
                return state.with_filter("")
            return replace(state, mode=Mode.CANCELLED)
        return state

    def _filter_transition(self, state: PickerState, command: Command) -> PickerState:
        action = command.action
        if action is Action.APPEND_CHAR:
            return state.with_filter(state.filter_text + command.char)
        if action is Action.DELETE_CHAR:
            if not state.filter_text:
                return state
            return state.with_filter(state.filter_text[:-1])
        if action is Action.CLEAR_FILTER:
            return state.with_filter("")
        if action is Action.COMMIT_FILTER:
            return replace(state, mode=Mode.NORMAL)
        if action is Action.EXIT_FILTER:
            if not state.filter_text:
                return replace(state, mode=Mode.CANCELLED)
            return replace(state.with_filter(""), mode=Mode.NORMAL)
        return state

    def confirmed_indices(self, state: PickerState) -> list[int]:
        return self.selection.confirmed_indices(state)
