from gui.v1.state import (
    PROFILE_ACTIONS,
    PROFILE_FIELDS,
    FieldDescriptor,
    FieldState,
    initial_field_states,
    noop,
)


def test_profile_field_descriptors_in_order():
    assert [(f.label, f.default_value) for f in PROFILE_FIELDS] == [
        ("Full Name", "John Doe"),
        ("Email", "johndoe@email.com"),
        ("Age", "30"),
    ]


def test_profile_actions_in_order():
    assert [a.label for a in PROFILE_ACTIONS] == ["Change Password", "Sign Out"]


def test_from_descriptor_seeds_default():
    state = FieldState.from_descriptor(FieldDescriptor("Age", "30"))
    assert state.label == "Age"
    assert state.value == "30"


def test_from_descriptor_never_shares_instances():
    descriptor = PROFILE_FIELDS[0]
    first = FieldState.from_descriptor(descriptor)
    second = FieldState.from_descriptor(descriptor)
    assert first is not second
    first.edit("Jane")
    assert second.value == "John Doe"


def test_edit_accepts_empty_and_coerces_none():
    state = FieldState.from_descriptor(PROFILE_FIELDS[1])
    state.edit("")
    assert state.value == ""
    state.edit(None)
    assert state.value == ""


def test_initial_field_states_one_fresh_cell_per_field():
    states = initial_field_states()
    assert [s.value for s in states] == ["John Doe", "johndoe@email.com", "30"]
    assert len({id(s) for s in states}) == 3


def test_noop_accepts_anything():
    assert noop() is None
    assert noop(object(), key="value") is None
