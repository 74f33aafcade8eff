from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.console import Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..view import ViewModel
from .keys import KeyReader


# ---------- view helpers ----------


def _table(view: ViewModel) -> Table:
    t = Table(
        title=view.title,
        show_header=bool(view.header),
        expand=True,
        header_style="bold",
    )
    if view.header:
        t.add_column(view.header[0], ratio=7)
        for label in view.header[1:]:
            t.add_column(label, ratio=3, justify="right")
    else:
        t.add_column("", justify="center")
    for i, row in enumerate(view.rows):
        style = f"bold on {view.highlight}" if i == view.selected else None
        t.add_row(*row, style=style)
    return t


def _form(view: ViewModel) -> Group:
    boxes = []
    for label, value in view.fields:
        active = label == view.active_field
        boxes.append(
            Panel(
                Text(value),
                title=label,
                title_align="left",
                border_style="yellow" if active else "white",
                style="yellow" if active else "",
            )
        )
    return Group(*boxes)


def build_renderable(view: ViewModel):
    body = _form(view) if view.is_form else _table(view)
    panel = Panel(
        body,
        title=view.title if view.is_form else None,
        subtitle=view.footer or None,
        width=72,
    )
    return Align.center(panel, vertical="middle")


# ---------- Rich UI ----------


class RichUI:
    """Full-screen UI on the alternate screen; keys come from a cbreak KeyReader."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.keys = KeyReader()
        self._live: Live | None = None

    def __enter__(self) -> "RichUI":
        self.keys.__enter__()
        try:
            self._live = Live(console=self.console, screen=True, auto_refresh=False, transient=True)
            self._live.__enter__()
        except BaseException:
            self.keys.__exit__(None, None, None)
            raise
        return self

    def __exit__(self, *exc) -> None:
        try:
            if self._live is not None:
                self._live.__exit__(*exc)
                self._live = None
        finally:
            self.keys.__exit__(*exc)

    def render(self, view: ViewModel) -> None:
        renderable = build_renderable(view)
        if self._live is None:
            self.console.print(renderable)
        else:
            self._live.update(renderable, refresh=True)

    def read_intent(self):
        return self.keys.read_intent()
