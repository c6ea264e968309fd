import pytest

from gridmdp.config import (
    COLUMNS,
    GOAL,
    OBSTACLES,
    ROWS,
    STATE_MAP,
    actions,
    rewards,
    transition_probabilities,
)
from gridmdp.mdp import move, position_of, state_at, value_iteration


ALL_STATES = [state for row in STATE_MAP for state in row]


def test_position_of_first_cell():
    assert position_of("S0") == (0, 0)


def test_position_of_unknown_state():
    assert position_of("nowhere") is None


@pytest.mark.parametrize("state", ALL_STATES)
def test_position_and_state_round_trip(state):
    row, col = position_of(state)
    assert STATE_MAP[row][col] == state
    expected = None if state in OBSTACLES else state
    assert state_at(row, col) == expected


@pytest.mark.parametrize(
    "row, col", [(-1, 0), (0, -1), (ROWS, 0), (0, COLUMNS), (ROWS, COLUMNS)]
)
def test_state_at_out_of_bounds(row, col):
    assert state_at(row, col) is None


@pytest.mark.parametrize(
    "action, expected",
    [("N", (1, 3)), ("S", (3, 3)), ("E", (2, 4)), ("O", (2, 2)), ("X", (2, 3))],
)
def test_move(action, expected):
    assert move(2, 3, action) == expected


def test_move_may_leave_the_map():
    assert move(0, 0, "N") == (-1, 0)
    assert move(0, 0, "O") == (0, -1)


def test_value_iteration_goal_value_fixed():
    values, policy = value_iteration(0.9, 0.001)
    assert values[GOAL] == rewards()[GOAL]
    assert GOAL not in policy


def test_value_iteration_covers_all_other_cells():
    values, policy = value_iteration(0.9, 0.001)
    assert set(values) == set(ALL_STATES)
    assert set(policy) == set(ALL_STATES) - {GOAL}
    assert set(policy.values()) <= set(actions())


def test_value_iteration_non_goal_values_below_goal():
    values, _ = value_iteration(0.94, 0.001)
    assert all(values[s] < values[GOAL] for s in ALL_STATES if s != GOAL)


def test_value_iteration_neighbours_head_to_goal():
    _, policy = value_iteration(0.9, 0.001)
    assert policy["S28"] == "N"
    assert policy["S22"] == "E"


def test_explicit_default_model_matches_implicit():
    implicit = value_iteration(0.86, 0.001)
    explicit = value_iteration(0.86, 0.001, transition_probabilities())
    assert implicit[1] == explicit[1]
    for state in ALL_STATES:
        assert implicit[0][state] == pytest.approx(explicit[0][state])


def test_deterministic_model_value_next_to_goal():
    model = {a: {a: 1.0} for a in actions()}
    values, policy = value_iteration(0.9, 1e-9, model)
    table = rewards()
    assert policy["S28"] == "N"
    assert values["S28"] == pytest.approx(table["S28"] + 0.9 * table[GOAL])


def test_smaller_epsilon_refines_values():
    coarse, _ = value_iteration(0.9, 0.01)
    fine, _ = value_iteration(0.9, 1e-6)
    for state in ALL_STATES:
        assert coarse[state] == pytest.approx(fine[state], abs=0.2)


def test_higher_discount_raises_values():
    low, _ = value_iteration(0.86, 1e-6)
    high, _ = value_iteration(0.98, 1e-6)
    assert high["S0"] > low["S0"]


def test_model_missing_action_raises():
    model = {"N": {"N": 1.0}}
    with pytest.raises(KeyError):
        value_iteration(0.9, 0.001, model)