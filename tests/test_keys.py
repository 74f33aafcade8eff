import pytest

from initrack.models import CANCEL
from initrack.models import CONFIRM
from initrack.models import DELETE_CHAR
from initrack.models import DOWN
from initrack.models import NEXT_FIELD
from initrack.models import UP
from initrack.models import Intent
from initrack.ui.keys import KeyReader
from initrack.ui.keys import translate_key


@pytest.mark.parametrize(
    "raw, intent",
    [
        ("\r", CONFIRM),
        ("\n", CONFIRM),
        ("\x1b", CANCEL),
        ("\x1b[A", UP),
        ("\x1bOB", DOWN),
        ("\t", NEXT_FIELD),
        ("\x7f", DELETE_CHAR),
        ("\b", DELETE_CHAR),
        ("z", Intent.of_char("z")),
        ("-", Intent.of_char("-")),
        ("é", Intent.of_char("é")),
    ],
)
def test_translate_key(raw, intent):
    assert translate_key(raw) == intent


def test_unmapped_keys_ignored():
    assert translate_key("\x1b[C") is None
    assert translate_key("\x1b[15~") is None
    assert translate_key("\x01") is None


def test_ctrl_c_interrupts():
    with pytest.raises(KeyboardInterrupt):
        translate_key("\x03")


def test_reader_on_pipe():
    import os

    r, w = os.pipe()
    os.write(w, "ab\x1b[Bé\r".encode("utf-8"))
    os.close(w)
    with os.fdopen(r, "rb") as stream:
        with KeyReader(stream) as keys:
            got = [keys.read_intent() for _ in range(5)]
            # end of input reads as cancel
            assert keys.read_intent() == CANCEL
    assert got == [Intent.of_char("a"), Intent.of_char("b"), DOWN, Intent.of_char("é"), CONFIRM]
