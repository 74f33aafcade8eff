from __future__ import annotations

import sys

from ..view import ViewModel
from .keys import KeyReader

WHITE = "\033[37m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
BOLD = "\033[1m"
RST = "\033[0m"
BG = {"blue": "\033[44m", "red": "\033[41m"}

CLEAR = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

NAME_WIDTH = 30


def row_line(view: ViewModel, i: int, row) -> str:
    if view.header:
        text = f"{row[0]:<{NAME_WIDTH}} {row[1]:>10}"
    else:
        text = f"  {row[0]}"
    if i == view.selected:
        return f"{BG.get(view.highlight, '')}{BOLD}{text}{RST}"
    return text


def view_lines(view: ViewModel) -> list[str]:
    out = [f"{BOLD}{CYAN}{view.title}{RST}", ""]
    if view.is_form:
        for label, value in view.fields:
            mark = f"{YELLOW}> " if label == view.active_field else "  "
            out.append(f"{mark}{label}: {value}{RST}")
    else:
        if view.header:
            out.append(f"{BOLD}{view.header[0]:<{NAME_WIDTH}} {view.header[1]:>10}{RST}")
        for i, row in enumerate(view.rows):
            out.append(row_line(view, i, row))
    if view.footer:
        out.extend(["", f"{WHITE}{view.footer}{RST}"])
    return out


class TerminalUI:
    """Plain ANSI output, redrawn from scratch on every render."""

    def __init__(self, out=None) -> None:
        self.out = out if out is not None else sys.stdout
        self.keys = KeyReader()

    def __enter__(self) -> "TerminalUI":
        self.keys.__enter__()
        print(HIDE_CURSOR, end="", file=self.out, flush=True)
        return self

    def __exit__(self, *exc) -> None:
        try:
            print(f"{RST}{SHOW_CURSOR}{CLEAR}", end="", file=self.out, flush=True)
        finally:
            self.keys.__exit__(*exc)

    def render(self, view: ViewModel) -> None:
        print(CLEAR, end="", file=self.out)
        for line in view_lines(view):
            print(line, file=self.out)
        self.out.flush()

    def read_intent(self):
        return self.keys.read_intent()
