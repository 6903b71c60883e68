from offline_translator.application import session
from offline_translator.application.session import PaneState
from offline_translator.domain.models import Side


def make_state(**kwargs):
    defaults = dict(left_language="English", right_language="Indonesian")
    defaults.update(kwargs)
    return PaneState(**defaults)


def test_left_edit_translates_left_to_right():
    state = session.apply_edit(make_state(), Side.LEFT, "Hello")
    plan = session.plan_translation(state)
    assert plan == session.TranslationPlan("Hello", "English", "Indonesian", Side.RIGHT)


def test_right_edit_translates_right_to_left():
    state = make_state(left_text="Hello", right_text="Halo")
    state = session.apply_edit(state, Side.RIGHT, "Selamat pagi")
    plan = session.plan_translation(state)
    assert plan.text == "Selamat pagi"
    assert plan.source_selector == "Indonesian"
    assert plan.target_selector == "English"
    assert plan.output_side is Side.LEFT


def test_clearing_a_pane_clears_the_other():
    state = make_state(left_text="Hello", right_text="Halo")
    state = session.apply_edit(state, Side.LEFT, "   ")
    assert state.right_text == ""
    assert state.left_text == "   "

    state = make_state(left_text="Hello", right_text="Halo")
    state = session.apply_edit(state, Side.RIGHT, "")
    assert state.left_text == ""


def test_non_blank_edit_keeps_other_pane():
    state = make_state(left_text="Hello", right_text="Halo")
    state = session.apply_edit(state, Side.LEFT, "Hello there")
    assert state.right_text == "Halo"


def test_swap_keeps_source_text_as_source():
    state = session.apply_edit(make_state(right_text="Halo"), Side.LEFT, "Hello")
    swapped = session.swap(state)

    assert swapped.left_language == "Indonesian"
    assert swapped.right_language == "English"
    assert swapped.left_text == "Halo"
    assert swapped.right_text == "Hello"
    plan = session.plan_translation(swapped)
    assert plan.text == "Hello"
    assert plan.source_selector == "English"
    assert plan.output_side is Side.LEFT


def test_swap_twice_is_identity():
    state = make_state(left_text="a", right_text="b", last_edited=Side.RIGHT)
    assert session.swap(session.swap(state)) == state


def test_select_language():
    state = session.select_language(make_state(), Side.LEFT, "Auto")
    assert state.left_language == "Auto"
    assert session.plan_translation(state).source_selector == "Auto"


def test_can_translate():
    assert not session.can_translate(make_state())
    assert not session.can_translate(make_state(left_text="  "))
    assert session.can_translate(make_state(left_text="Hi"))
    # The right pane has text but the left one is the source
    assert not session.can_translate(make_state(right_text="Halo"))
