# === IMPORT SENTRY ===
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


# Enums / simple types
class SetupMenu(Enum):
    POPULATE_ENTRIES = auto()
    ADD_ENTRY = auto()
    REMOVE_ENTRY = auto()
    VIEW_ORDER = auto()

    def __str__(self) -> str:
        return self.name


class InputField(Enum):
    NAME = auto()
    INITIATIVE = auto()

    def toggled(self) -> "InputField":
        return InputField.INITIATIVE if self is InputField.NAME else InputField.NAME


class IntentKind(Enum):
    UP = auto()
    DOWN = auto()
    CONFIRM = auto()
    CANCEL = auto()
    NEXT_FIELD = auto()
    DELETE_CHAR = auto()
    CHAR = auto()


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    char: Optional[str] = None

    @classmethod
    def of_char(cls, c: str) -> "Intent":
        return cls(IntentKind.CHAR, c)


# Shorthands for the fixed intents; CHAR needs Intent.of_char.
UP = Intent(IntentKind.UP)
DOWN = Intent(IntentKind.DOWN)
CONFIRM = Intent(IntentKind.CONFIRM)
CANCEL = Intent(IntentKind.CANCEL)
NEXT_FIELD = Intent(IntentKind.NEXT_FIELD)
DELETE_CHAR = Intent(IntentKind.DELETE_CHAR)


@dataclass(frozen=True)
class Combatant:
    name: str
    initiative: int


# Menu rows on the PopulateEntries screen, by index.
ADD_ENTRY = 0
REMOVE_ENTRY = 1
VIEW_ORDER = 2
CONTINUE = 3
MENU_MAX_INDEX = CONTINUE


@dataclass
class SetupState:
    combatants: List[Combatant] = field(default_factory=list)
    menu: SetupMenu = SetupMenu.POPULATE_ENTRIES
    selected: int = 0
    max_size: int = MENU_MAX_INDEX
    name_input: str = ""
    initiative_input: str = ""
    active_field: InputField = InputField.NAME


@dataclass
class CombatState:
    combatants: List[Combatant]
    current_turn: int = 0
    round: int = 0

    @property
    def active(self) -> Combatant:
        return self.combatants[self.current_turn]
