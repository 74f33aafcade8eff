# === IMPORT SENTRY (do not move/duplicate) ===
from __future__ import annotations

from .engine import handle_combat_intent
from .engine import next_turn
from .engine import previous_turn
from .engine import run_combat
from .engine import start_combat
from .errors import EmptyRosterError
from .errors import IntegerParseError
from .errors import LineFormatError
from .errors import RosterSourceError
from .errors import TrackerError
from .errors import UsageError
from .loader import load_roster
from .loader import parse_record
from .loader import read_roster

# Convenient entrypoint
from .main import main
from .models import CombatState
from .models import Combatant
from .models import InputField
from .models import Intent
from .models import IntentKind
from .models import SetupMenu
from .models import SetupState
from .rules import sort_by_initiative
from .setup_menu import handle_setup_intent
from .setup_menu import new_setup_state
from .setup_menu import run_setup

__all__ = [
    "Combatant",
    "CombatState",
    "SetupState",
    "SetupMenu",
    "InputField",
    "Intent",
    "IntentKind",
    "TrackerError",
    "UsageError",
    "RosterSourceError",
    "LineFormatError",
    "IntegerParseError",
    "EmptyRosterError",
    "parse_record",
    "load_roster",
    "read_roster",
    "sort_by_initiative",
    "new_setup_state",
    "handle_setup_intent",
    "run_setup",
    "start_combat",
    "next_turn",
    "previous_turn",
    "handle_combat_intent",
    "run_combat",
    "main",
]
