from __future__ import annotations

import re
from typing import Iterable
from typing import List
from typing import Optional

from .models import Combatant

# Initiative is stored as a signed 32-bit value.
INITIATIVE_MIN = -(2**31)
INITIATIVE_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_initiative(text: str) -> Optional[int]:
    """Return the integer in ``text`` or None. No whitespace, optional sign, i32 range."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INITIATIVE_MIN or value > INITIATIVE_MAX:
        return None
    return value


def accepts_initiative_char(buffer: str, c: str) -> bool:
    # digits anywhere, '-' only as the first character
    if c.isascii() and c.isdigit():
        return True
    return c == "-" and buffer == ""


def sort_by_initiative(combatants: Iterable[Combatant]) -> List[Combatant]:
    """Highest initiative first; ties keep their relative order (stable sort)."""
    return sorted(combatants, key=lambda c: c.initiative, reverse=True)
