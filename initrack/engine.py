from __future__ import annotations

import logging
from typing import Sequence

from .errors import EmptyRosterError
from .models import Combatant
from .models import CombatState
from .models import Intent
from .models import IntentKind

logger = logging.getLogger(__name__)


def start_combat(combatants: Sequence[Combatant]) -> CombatState:
    """Round 0, first combatant up. The roster must already be in turn order."""
    if not combatants:
        raise EmptyRosterError("Initialization error: Unable to form a combatants list")
    return CombatState(combatants=list(combatants), current_turn=0, round=0)


def next_turn(state: CombatState) -> None:
    state.current_turn = (state.current_turn + 1) % len(state.combatants)
    if state.current_turn == 0:
        state.round += 1
        logger.debug("round %d begins", state.round + 1)


def previous_turn(state: CombatState) -> None:
    # No floor on round: stepping back from the first turn of round 0 gives -1.
    if state.current_turn == 0:
        state.round -= 1
        state.current_turn = len(state.combatants) - 1
    else:
        state.current_turn -= 1


def handle_combat_intent(state: CombatState, intent: Intent) -> bool:
    """Confirm advances, Backspace steps back, Cancel ends combat (returns True)."""
    kind = intent.kind
    if kind is IntentKind.CONFIRM:
        next_turn(state)
    elif kind is IntentKind.DELETE_CHAR:
        previous_turn(state)
    elif kind is IntentKind.CANCEL:
        return True
    return False


def run_combat(ui, state: CombatState) -> CombatState:
    from .view import combat_view

    while True:
        ui.render(combat_view(state))
        if handle_combat_intent(state, ui.read_intent()):
            return state
