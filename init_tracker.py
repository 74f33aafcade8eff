"""Facade for convenient imports and CLI entry (flake8 clean)."""

import sys

from initrack import Combatant
from initrack import CombatState
from initrack import Intent
from initrack import IntentKind
from initrack import SetupState
from initrack import handle_combat_intent
from initrack import handle_setup_intent
from initrack import load_roster
from initrack import read_roster
from initrack import sort_by_initiative
from initrack.main import main

__all__ = [
    "Combatant",
    "CombatState",
    "SetupState",
    "Intent",
    "IntentKind",
    "load_roster",
    "read_roster",
    "sort_by_initiative",
    "handle_setup_intent",
    "handle_combat_intent",
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
