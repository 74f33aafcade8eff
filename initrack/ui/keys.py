"""Raw keyboard input, translated to intents at the edge.

``KeyReader`` puts stdin into cbreak mode (no echo, no line buffering) for
the lifetime of a ``with`` block and always restores the saved terminal
attributes on the way out.
"""

from __future__ import annotations

import codecs
import os
import sys
from select import select
from typing import Optional

from ..models import CANCEL
from ..models import CONFIRM
from ..models import DELETE_CHAR
from ..models import DOWN
from ..models import NEXT_FIELD
from ..models import UP
from ..models import Intent

ESC = "\x1b"
CTRL_C = "\x03"
# how long to wait for the rest of an escape sequence before treating ESC as a key
ESC_TIMEOUT = 0.05

_KEYMAP = {
    "\r": CONFIRM,
    "\n": CONFIRM,
    ESC: CANCEL,
    ESC + "[A": UP,
    ESC + "OA": UP,
    ESC + "[B": DOWN,
    ESC + "OB": DOWN,
    "\t": NEXT_FIELD,
    "\x7f": DELETE_CHAR,
    "\b": DELETE_CHAR,
}


def translate_key(raw: str) -> Optional[Intent]:
    """Map one raw key (a char or an escape sequence) to an intent, or None to ignore it."""
    if raw == CTRL_C:
        raise KeyboardInterrupt
    intent = _KEYMAP.get(raw)
    if intent is not None:
        return intent
    if len(raw) == 1 and raw.isprintable():
        return Intent.of_char(raw)
    return None


class KeyReader:
    def __init__(self, stream=None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._fd: Optional[int] = None
        self._saved = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def __enter__(self) -> "KeyReader":
        self._fd = self.stream.fileno()
        if os.isatty(self._fd):
            import termios
            import tty

            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, *exc) -> None:
        if self._saved is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def _pending(self, timeout: float) -> bool:
        ready, _, _ = select([self._fd], [], [], timeout)
        return bool(ready)

    def _read_char(self) -> str:
        while True:
            data = os.read(self._fd, 1)
            if not data:
                raise EOFError
            text = self._decoder.decode(data)
            if text:
                return text

    def read_key(self) -> str:
        c = self._read_char()
        if c != ESC or not self._pending(ESC_TIMEOUT):
            return c
        seq = c + self._read_char()
        if seq[-1] not in "[O":
            return seq
        # CSI / SS3: parameters until a final byte in '@'..'~'
        while True:
            c = self._read_char()
            seq += c
            if "@" <= c <= "~":
                return seq

    def read_intent(self) -> Intent:
        """Block until a key maps to an intent. End of input reads as Cancel."""
        while True:
            try:
                raw = self.read_key()
            except EOFError:
                return CANCEL
            intent = translate_key(raw)
            if intent is not None:
                return intent
