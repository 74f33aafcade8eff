from __future__ import annotations


def get_ui(name: str):
    if name == "rich":
        from .rich_ui import RichUI

        return RichUI()
    if name in ("term", "terminal"):
        from .terminal import TerminalUI

        return TerminalUI()
    raise ValueError(f"Unknown UI '{name}'. Use 'rich' or 'term'.")
