#!/usr/bin/env python3
"""Fail if the state machines or render model import a presentation library."""
import pathlib
import re
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
CORE = ("models.py", "errors.py", "rules.py", "loader.py", "setup_menu.py", "engine.py", "view.py")
BANNED = ("rich", "termios", "tty", "curses")


def check_file(p: pathlib.Path) -> list:
    fails = []
    s = p.read_text(encoding="utf-8", errors="ignore")
    for m in re.finditer(r"^\s*(?:from\s+([\w.]+)\s+import|import\s+([\w.]+))", s, flags=re.M):
        mod = (m.group(1) or m.group(2)).split(".")[0]
        if mod in BANNED:
            fails.append((str(p), mod))
    return fails


def find_violations(root: pathlib.Path = ROOT) -> list:
    fails = []
    for name in CORE:
        fails.extend(check_file(root / "initrack" / name))
    return fails


def main(root: pathlib.Path = ROOT) -> int:
    fails = find_violations(root)
    for fn, mod in fails:
        print(f"[core-import] {fn}: imports '{mod}'; keep terminal code in initrack/ui", file=sys.stderr)
    return 1 if fails else 0


if __name__ == "__main__":
    sys.exit(main())
