"""Render model: a plain description of what to draw for the current state.

Nothing here knows about rich or ANSI escapes; the UIs in ``initrack.ui``
turn a ``ViewModel`` into output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from typing import Tuple

from .models import CombatState
from .models import InputField
from .models import SetupMenu
from .models import SetupState

MENU_ROWS = ("Create New Entry", "Remove Entry", "View Initiative Order", "Continue")
ROSTER_HEADER = ("Name", "Initiative")


@dataclass(frozen=True)
class ViewModel:
    title: str
    header: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()
    selected: Optional[int] = None
    highlight: str = "blue"
    # (label, value) pairs for form screens
    fields: Tuple[Tuple[str, str], ...] = ()
    active_field: Optional[str] = None
    footer: str = ""

    @property
    def is_form(self) -> bool:
        return bool(self.fields)


def _roster_rows(combatants) -> Tuple[Tuple[str, ...], ...]:
    return tuple((c.name, str(c.initiative)) for c in combatants)


def setup_view(state: SetupState) -> ViewModel:
    menu = state.menu
    if menu is SetupMenu.POPULATE_ENTRIES:
        return ViewModel(
            title="Navigate with ↑/↓, Enter to select",
            rows=tuple((label,) for label in MENU_ROWS),
            selected=state.selected,
            footer=f"{len(state.combatants)} combatant(s) | Esc to start",
        )
    if menu is SetupMenu.ADD_ENTRY:
        return ViewModel(
            title="New Entry",
            fields=(("Name", state.name_input), ("Initiative", state.initiative_input)),
            active_field="Name" if state.active_field is InputField.NAME else "Initiative",
            footer="Tab to switch field, Enter to add, Esc to cancel",
        )
    if menu is SetupMenu.REMOVE_ENTRY:
        return ViewModel(
            title="Select entry to remove (Enter to delete, Esc to cancel)",
            header=ROSTER_HEADER,
            rows=_roster_rows(state.combatants),
            selected=state.selected,
            highlight="red",
        )
    return ViewModel(
        title="Initiative Order",
        header=ROSTER_HEADER,
        rows=_roster_rows(state.combatants),
        footer="Enter to sort and return, Esc to return",
    )


def combat_view(state: CombatState) -> ViewModel:
    return ViewModel(
        title=f"Initiative! Round {state.round + 1} - Turn {state.current_turn + 1}",
        header=ROSTER_HEADER,
        rows=_roster_rows(state.combatants),
        selected=state.current_turn,
        footer=f"Up: {state.active.name} | Enter: next turn | Backspace: previous turn | Esc: quit",
    )
