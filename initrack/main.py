"""Orchestrator: pick the roster source, sort it, then run combat."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Callable
from typing import List
from typing import Optional
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler

from .engine import run_combat
from .engine import start_combat
from .errors import EmptyRosterError
from .errors import TrackerError
from .errors import UsageError
from .loader import read_roster
from .models import Combatant
from .rules import sort_by_initiative
from .setup_menu import run_setup

logger = logging.getLogger(__name__)

USAGE = "Usage: initrack [--ui rich|term] [-v] [<filename>]"


class _Parser(argparse.ArgumentParser):
    """Bad command lines raise UsageError (exit 1) instead of exiting with 2."""

    def error(self, message: str):
        raise UsageError(f"{USAGE}\n{self.prog}: {message}")


@dataclass
class Settings:
    roster: Optional[str] = None
    ui: str = "rich"
    verbose: bool = False
    encoding: str = "utf-8"


def parse_args(argv: Optional[Sequence[str]] = None) -> Settings:
    p = _Parser(prog="initrack", description="Turn order tracker for tabletop encounters.")
    p.add_argument("roster", nargs="*", help="roster file, one '<Name>, <Initiative>' per line")
    p.add_argument("--ui", default="rich", choices=["rich", "term"], help="UI to use")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("--encoding", default="utf-8", help="roster file encoding")
    args = p.parse_args(argv)
    if len(args.roster) > 1:
        raise UsageError(USAGE)
    return Settings(
        roster=args.roster[0] if args.roster else None,
        ui=args.ui,
        verbose=args.verbose,
        encoding=args.encoding,
    )


def configure_logging(verbose: bool = False) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _ensure_roster(combatants: List[Combatant]) -> List[Combatant]:
    if not combatants:
        raise EmptyRosterError("Initialization error: Unable to form a combatants list")
    return sort_by_initiative(combatants)


def run(settings: Settings, ui_factory: Callable) -> None:
    combatants: Optional[List[Combatant]] = None
    if settings.roster is not None:
        # load before taking over the screen so a bad file reports cleanly
        combatants = _ensure_roster(read_roster(settings.roster, settings.encoding))

    with ui_factory(settings.ui) as ui:
        if combatants is None:
            combatants = _ensure_roster(run_setup(ui))
        logger.debug("combat order: %s", ", ".join(c.name for c in combatants))
        state = run_combat(ui, start_combat(combatants))
    logger.debug("combat ended in round %d", state.round + 1)


def main(argv: Optional[Sequence[str]] = None, ui_factory: Optional[Callable] = None) -> int:
    """Entry point; returns the process exit code."""
    err = Console(stderr=True)
    try:
        settings = parse_args(argv)
    except UsageError as e:
        err.print(str(e), markup=False, highlight=False)
        return 1

    configure_logging(settings.verbose)
    if ui_factory is None:
        from .ui import get_ui as ui_factory

    try:
        run(settings, ui_factory)
    except TrackerError as e:
        logger.debug("aborting: %r", e)
        err.print(f"Error: {e}", markup=False, highlight=False)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def _cli() -> None:
    import sys

    sys.exit(main())
