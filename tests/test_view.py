from initrack.engine import next_turn
from initrack.engine import previous_turn
from initrack.engine import start_combat
from initrack.models import Combatant
from initrack.models import InputField
from initrack.models import SetupMenu
from initrack.setup_menu import new_setup_state
from initrack.view import MENU_ROWS
from initrack.view import combat_view
from initrack.view import setup_view


def test_main_menu_view():
    st = new_setup_state()
    st.selected = 2
    v = setup_view(st)
    assert [r[0] for r in v.rows] == list(MENU_ROWS)
    assert v.selected == 2
    assert not v.is_form


def test_form_view_marks_active_field():
    st = new_setup_state()
    st.menu = SetupMenu.ADD_ENTRY
    st.name_input = "Sam"
    st.active_field = InputField.INITIATIVE
    v = setup_view(st)
    assert v.is_form
    assert v.fields == (("Name", "Sam"), ("Initiative", ""))
    assert v.active_field == "Initiative"


def test_remove_view_passes_selection_through():
    st = new_setup_state()
    st.combatants = [Combatant("Sam", 4)]
    st.menu = SetupMenu.REMOVE_ENTRY
    st.selected = 1
    v = setup_view(st)
    assert v.rows == (("Sam", "4"),)
    assert v.selected == 1
    assert v.highlight == "red"


def test_order_view_has_no_selection():
    st = new_setup_state()
    st.menu = SetupMenu.VIEW_ORDER
    assert setup_view(st).selected is None


def test_combat_title_is_one_based():
    st = start_combat([Combatant("A", 3), Combatant("B", 1)])
    assert combat_view(st).title == "Initiative! Round 1 - Turn 1"
    next_turn(st); next_turn(st); next_turn(st)
    v = combat_view(st)
    assert v.title == "Initiative! Round 2 - Turn 2"
    assert v.selected == 1
    assert v.footer.startswith("Up: B |")


def test_combat_title_negative_round():
    st = start_combat([Combatant("A", 3)])
    previous_turn(st); previous_turn(st)
    assert combat_view(st).title == "Initiative! Round -1 - Turn 1"
