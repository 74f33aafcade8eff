"""Interactive roster builder used when no roster file is given.

The whole screen state lives in one ``SetupState``; ``handle_setup_intent``
is the only thing that mutates it. Invalid form input is dropped without
any message to the user.
"""

from __future__ import annotations

import logging
from typing import List

from .models import ADD_ENTRY
from .models import MENU_MAX_INDEX
from .models import REMOVE_ENTRY
from .models import VIEW_ORDER
from .models import Combatant
from .models import InputField
from .models import Intent
from .models import IntentKind
from .models import SetupMenu
from .models import SetupState
from .rules import accepts_initiative_char
from .rules import parse_initiative
from .rules import sort_by_initiative

logger = logging.getLogger(__name__)


def new_setup_state() -> SetupState:
    return SetupState()


def _back_to_menu(state: SetupState) -> None:
    state.menu = SetupMenu.POPULATE_ENTRIES
    state.selected = 0


def _enter(state: SetupState, menu: SetupMenu) -> None:
    logger.debug("setup: %s -> %s", state.menu, menu)
    state.menu = menu
    state.selected = 0


def add_entry(state: SetupState) -> None:
    if not state.name_input:
        _back_to_menu(state)
        return
    initiative = parse_initiative(state.initiative_input)
    if initiative is not None:
        state.combatants.append(Combatant(name=state.name_input, initiative=initiative))
        logger.debug("setup: added %r (%d)", state.name_input, initiative)
    state.name_input = ""
    state.initiative_input = ""
    state.active_field = InputField.NAME
    _back_to_menu(state)


def remove_entry(state: SetupState) -> None:
    # selected can sit one past the last row; Confirm there changes nothing
    if not 0 <= state.selected < len(state.combatants):
        return
    removed = state.combatants.pop(state.selected)
    logger.debug("setup: removed %r", removed.name)
    _back_to_menu(state)


def view_order(state: SetupState) -> None:
    state.combatants[:] = sort_by_initiative(state.combatants)
    _back_to_menu(state)


def _confirm(state: SetupState) -> bool:
    menu = state.menu
    if menu is SetupMenu.POPULATE_ENTRIES:
        if state.selected == ADD_ENTRY:
            _enter(state, SetupMenu.ADD_ENTRY)
        elif state.selected == REMOVE_ENTRY:
            _enter(state, SetupMenu.REMOVE_ENTRY)
        elif state.selected == VIEW_ORDER:
            _enter(state, SetupMenu.VIEW_ORDER)
        else:
            return True
    elif menu is SetupMenu.ADD_ENTRY:
        add_entry(state)
    elif menu is SetupMenu.REMOVE_ENTRY:
        remove_entry(state)
    elif menu is SetupMenu.VIEW_ORDER:
        view_order(state)
    return False


def _type_char(state: SetupState, c: str) -> None:
    if state.active_field is InputField.NAME:
        state.name_input += c
    elif accepts_initiative_char(state.initiative_input, c):
        state.initiative_input += c


def _delete_char(state: SetupState) -> None:
    if state.active_field is InputField.NAME:
        state.name_input = state.name_input[:-1]
    else:
        state.initiative_input = state.initiative_input[:-1]


def _update_bound(state: SetupState) -> None:
    if state.menu is SetupMenu.POPULATE_ENTRIES:
        state.max_size = MENU_MAX_INDEX
    else:
        # one past the last row is reachable; see remove_entry
        state.max_size = len(state.combatants)


def handle_setup_intent(state: SetupState, intent: Intent) -> bool:
    """Apply one intent. Returns True when setup is finished."""
    kind = intent.kind
    done = False
    if kind is IntentKind.UP:
        if state.selected > 0:
            state.selected -= 1
    elif kind is IntentKind.DOWN:
        if state.selected < state.max_size:
            state.selected += 1
    elif kind is IntentKind.CONFIRM:
        done = _confirm(state)
    elif kind is IntentKind.CANCEL:
        if state.menu is SetupMenu.POPULATE_ENTRIES:
            done = True
        else:
            _back_to_menu(state)
    elif state.menu is SetupMenu.ADD_ENTRY:
        if kind is IntentKind.NEXT_FIELD:
            state.active_field = state.active_field.toggled()
        elif kind is IntentKind.DELETE_CHAR:
            _delete_char(state)
        elif kind is IntentKind.CHAR and intent.char:
            _type_char(state, intent.char)
    _update_bound(state)
    return done


def run_setup(ui) -> List[Combatant]:
    """Drive the builder until the user continues or backs out of the main menu."""
    from .view import setup_view

    state = new_setup_state()
    while True:
        ui.render(setup_view(state))
        if handle_setup_intent(state, ui.read_intent()):
            logger.debug("setup finished with %d combatants", len(state.combatants))
            return state.combatants
