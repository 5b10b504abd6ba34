import random

import pytest

from selection.state import MAX_SELECTED, SelectionState


def test_toggle_appends_in_order():
    state = SelectionState()
    assert state.toggle(3) == (3,)
    assert state.toggle(1) == (3, 1)


def test_toggle_present_member_removes_it():
    state = SelectionState()
    state.toggle(0)
    state.toggle(1)
    assert state.toggle(0) == (1,)
    assert state.evicted is None


def test_toggle_is_self_inverse_for_present_members():
    state = SelectionState()
    state.toggle(4)
    before = state.toggle(2)
    state.toggle(2)
    assert state.toggle(2) == before


def test_full_selection_evicts_oldest():
    """Given [A, B], toggling a new C yields [B, C] and reports A as evicted."""
    state = SelectionState()
    state.toggle(0)
    state.toggle(1)
    assert state.toggle(2) == (1, 2)
    assert state.evicted == 0


def test_reselect_when_full_only_removes():
    state = SelectionState()
    state.toggle(1)
    state.toggle(2)
    assert state.toggle(2) == (1,)
    assert state.evicted is None


def test_evicted_is_reset_on_next_toggle():
    state = SelectionState()
    for index in (0, 1, 2):
        state.toggle(index)
    assert state.evicted == 0
    state.toggle(5)
    assert state.evicted == 1
    state.toggle(5)
    assert state.evicted is None


def test_clear_empties_and_is_idempotent():
    state = SelectionState()
    state.toggle(0)
    state.toggle(1)
    assert state.clear() == ()
    assert state.clear() == ()
    assert len(state) == 0


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_random_toggles_stay_bounded_and_unique(seed):
    """
    Any sequence of toggles keeps at most two members and never repeats one.
    """
    rng = random.Random(seed)
    state = SelectionState()

    for _ in range(500):
        if rng.random() < 0.05:
            state.clear()
        else:
            state.toggle(rng.randrange(6))

        members = state.members
        assert len(members) <= MAX_SELECTED
        assert len(set(members)) == len(members)
