import pytest

from initrack.errors import IntegerParseError
from initrack.errors import LineFormatError
from initrack.errors import RosterSourceError
from initrack.loader import load_roster
from initrack.loader import parse_record
from initrack.loader import read_roster
from initrack.models import Combatant
from initrack.rules import sort_by_initiative


def test_fellowship_keeps_file_order_then_sorts():
    roster = load_roster(["Aragorn, 15", "Legolas, 18", "Gimli, 12"])
    assert roster == [Combatant("Aragorn", 15), Combatant("Legolas", 18), Combatant("Gimli", 12)]
    assert [c.name for c in sort_by_initiative(roster)] == ["Legolas", "Aragorn", "Gimli"]


def test_missing_delimiter_is_line_format_error():
    with pytest.raises(LineFormatError) as exc:
        load_roster(["BadLine"])
    assert exc.value.line_number == 1
    assert exc.value.line == "BadLine"


def test_too_many_fields_is_line_format_error():
    with pytest.raises(LineFormatError):
        parse_record("Frodo, 3, 4")


def test_non_numeric_initiative():
    with pytest.raises(IntegerParseError):
        parse_record("Frodo, abc")


def test_first_bad_record_aborts_load():
    with pytest.raises(IntegerParseError) as exc:
        load_roster(["Sam, 4", "Frodo, abc", "Merry, x"])
    assert exc.value.line_number == 2


def test_signs_and_verbatim_names():
    assert parse_record("Orc, -3") == Combatant("Orc", -3)
    assert parse_record("Elf, +7") == Combatant("Elf", 7)
    # loader does not trim or reject empty names
    assert parse_record(", 5") == Combatant("", 5)
    assert parse_record(" Bilbo , 2") == Combatant(" Bilbo ", 2)


def test_whitespace_around_initiative_rejected():
    with pytest.raises(IntegerParseError):
        parse_record("Frodo,  5")
    with pytest.raises(IntegerParseError):
        parse_record("Frodo, 5 ")


def test_initiative_outside_i32_rejected():
    assert parse_record("Big, 2147483647").initiative == 2147483647
    with pytest.raises(IntegerParseError):
        parse_record("Bigger, 2147483648")


def test_blank_line_is_malformed():
    with pytest.raises(LineFormatError):
        load_roster(["Sam, 4", "", "Pippin, 2"])


def test_read_roster_from_file(tmp_path):
    p = tmp_path / "party.txt"
    p.write_text("Aragorn, 15\r\nLegolas, 18\nGimli, 12\n", encoding="utf-8")
    roster = read_roster(p)
    assert [(c.name, c.initiative) for c in roster] == [("Aragorn", 15), ("Legolas", 18), ("Gimli", 12)]


def test_read_roster_missing_file(tmp_path):
    with pytest.raises(RosterSourceError):
        read_roster(tmp_path / "nope.txt")


def test_empty_file_gives_empty_roster(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_text("", encoding="utf-8")
    assert read_roster(p) == []
