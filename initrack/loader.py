# === IMPORT SENTRY ===
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable
from typing import List

from .errors import IntegerParseError
from .errors import LineFormatError
from .errors import RosterSourceError
from .models import Combatant
from .rules import parse_initiative

logger = logging.getLogger(__name__)

DELIMITER = ", "


def parse_record(line: str, line_number: int | None = None) -> Combatant:
    """Turn one ``<Name>, <Initiative>`` record into a Combatant.

    The name is taken verbatim, so an empty name is accepted here even though
    the interactive form refuses one.
    """
    fields = line.split(DELIMITER)
    if len(fields) != 2:
        raise LineFormatError("Line format: <Name>, <Initiative Roll>", line_number, line)
    name, initiative_text = fields
    initiative = parse_initiative(initiative_text)
    if initiative is None:
        raise IntegerParseError(f"invalid initiative {initiative_text!r}", line_number, line)
    return Combatant(name=name, initiative=initiative)


def load_roster(lines: Iterable[str]) -> List[Combatant]:
    """Parse records in order; the first bad record aborts the whole load."""
    roster: List[Combatant] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        roster.append(parse_record(line, number))
    return roster


def read_roster(path: str | Path, encoding: str = "utf-8") -> List[Combatant]:
    try:
        with open(path, "r", encoding=encoding) as f:
            roster = load_roster(f)
    except (OSError, UnicodeDecodeError) as e:
        raise RosterSourceError(f"cannot read roster {str(path)!r}: {e}") from e
    logger.debug("loaded %d combatants from %s", len(roster), path)
    return roster
